"""Git interface layer — adapter, log/status/remote parsing, models."""

from prevdiff.git.adapter import (
    GitError,
    get_file_log,
    get_file_status,
    get_remotes,
    get_repo_root,
)
from prevdiff.git.log_parser import parse_file_log
from prevdiff.git.models import (
    DELETED_OR_MISSING,
    STAGED_UNCOMMITTED,
    WORKING_TREE,
    CommitRecord,
    FileStatus,
    RemoteDescriptor,
)
from prevdiff.git.provider import GitProvider
from prevdiff.git.remote_parser import RemoteParser
from prevdiff.git.status_parser import parse_status

__all__ = [
    "DELETED_OR_MISSING",
    "STAGED_UNCOMMITTED",
    "WORKING_TREE",
    "CommitRecord",
    "FileStatus",
    "GitError",
    "GitProvider",
    "RemoteDescriptor",
    "RemoteParser",
    "get_file_log",
    "get_file_status",
    "get_remotes",
    "get_repo_root",
    "parse_file_log",
    "parse_status",
]

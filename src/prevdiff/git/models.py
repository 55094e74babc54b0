"""Data models for git history, working-tree status and remotes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

UNCOMMITTED_SHA = "0" * 40
DELETED_OR_MISSING = f"{UNCOMMITTED_SHA}-"
STAGED_UNCOMMITTED = f"{UNCOMMITTED_SHA}:"
WORKING_TREE = ""


def is_staged_uncommitted(sha: Optional[str]) -> bool:
    return sha == STAGED_UNCOMMITTED


@dataclass(frozen=True)
class CommitRecord:
    """One entry of a file's history."""

    sha: str
    repo_path: str
    file_name: str  # path at this revision, relative to repo_path
    previous_sha: Optional[str] = None
    previous_file_name: Optional[str] = None  # set on renames
    status: Optional[str] = None  # name-status letter: A, M, D, R, C, ...
    is_file: bool = True

    @property
    def previous_path(self) -> str:
        return self.previous_file_name or self.file_name


@dataclass(frozen=True)
class FileStatus:
    """Porcelain status of a single file."""

    path: str
    index_status: Optional[str] = None
    work_tree_status: Optional[str] = None
    original_path: Optional[str] = None  # set on staged renames

    @property
    def has_index_entry(self) -> bool:
        return self.index_status is not None


@dataclass
class RemoteDescriptor:
    """A configured remote, with every capability it was listed under."""

    repo_path: str
    name: str
    url: str
    host: str
    path: str
    capabilities: List[str] = field(default_factory=list)

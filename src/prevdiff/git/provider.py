"""Git-backed history and status lookups used by the resolver."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from prevdiff.git.adapter import get_file_log, get_file_status
from prevdiff.git.log_parser import parse_file_log
from prevdiff.git.models import CommitRecord, FileStatus
from prevdiff.git.status_parser import parse_status


class GitProvider:
    """Answers history and working-tree queries by shelling out to git."""

    def __init__(self, *, binary: str = "git", timeout: int = 30) -> None:
        self._git_kwargs = {"binary": binary, "timeout": timeout}

    def get_history_for_file(
        self,
        repo_path: str,
        file_path: str,
        *,
        max_entries: int,
        ref: Optional[str] = None,
        follow_renames: bool = True,
    ) -> Optional[List[CommitRecord]]:
        output = get_file_log(
            Path(repo_path),
            file_path,
            max_count=max_entries,
            ref=ref,
            follow_renames=follow_renames,
            **self._git_kwargs,
        )
        commits = parse_file_log(output, repo_path)
        return commits or None

    def get_status_for_file(self, repo_path: str, file_path: str) -> Optional[FileStatus]:
        output = get_file_status(Path(repo_path), file_path, **self._git_kwargs)
        return parse_status(output)

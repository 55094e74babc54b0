"""Parser for ``git status --porcelain`` (v1) output."""

from __future__ import annotations

from typing import Optional

from prevdiff.git.models import FileStatus
from prevdiff.git.quoting import unquote_path


def _column(code: str) -> Optional[str]:
    # Blank means unchanged; '?' and '!' mean untracked / ignored
    return None if code in (" ", "?", "!") else code


def parse_status(data: str) -> Optional[FileStatus]:
    """Return the status of the first file listed in *data*, or None if clean."""
    for raw_line in data.splitlines():
        line = raw_line.rstrip("\r")
        if len(line) < 4:
            continue

        x, y, rest = line[0], line[1], line[3:]

        original: Optional[str] = None
        if " -> " in rest:
            original, rest = rest.split(" -> ", 1)

        if x == "?" and y == "?":
            return FileStatus(path=unquote_path(rest), work_tree_status="?")

        return FileStatus(
            path=unquote_path(rest),
            index_status=_column(x),
            work_tree_status=_column(y),
            original_path=unquote_path(original) if original else None,
        )

    return None

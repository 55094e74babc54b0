"""Parser for single-file ``git log --name-status`` output.

The adapter asks git for one record separator (``\\x1e``) followed by the
commit sha, then the name-status line(s) for the followed file::

    \\x1e3f2a...
    <blank>
    R087\\tdocs/old.md\\tdocs/new.md
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

from prevdiff.git.models import CommitRecord
from prevdiff.git.quoting import unquote_path

RECORD_SEPARATOR = "\x1e"
LOG_FORMAT = "%x1e%H"

_SHA_RE = re.compile(r"^[0-9a-f]{7,64}$")
_STATUS_RE = re.compile(r"^([ACDMRTUX])(\d*)\t([^\t]+)(?:\t([^\t]+))?$")


@dataclass(frozen=True)
class _Entry:
    sha: str
    status: str
    file_name: str
    original_name: Optional[str]


def _parse_entry(chunk: str) -> Optional[_Entry]:
    lines = [line.rstrip("\r") for line in chunk.splitlines() if line.strip()]
    if not lines or not _SHA_RE.match(lines[0]):
        return None

    sha = lines[0]
    for line in lines[1:]:
        m = _STATUS_RE.match(line)
        if m is None:
            continue
        status, first = m.group(1), unquote_path(m.group(3))
        second = unquote_path(m.group(4)) if m.group(4) is not None else None
        if second is not None:
            # Renames and copies list "<from>\t<to>"
            return _Entry(sha=sha, status=status, file_name=second, original_name=first)
        return _Entry(sha=sha, status=status, file_name=first, original_name=None)

    return None


def parse_file_log(data: str, repo_path: str) -> List[CommitRecord]:
    """Return the commits in *data* newest first, linked to their predecessors.

    Each record's ``previous_sha`` is the next (older) record in the log.
    The oldest record points at its parent (``<sha>^``) unless the file was
    added in that commit, in which case there is nothing before it.
    """
    if not data:
        return []

    entries = [
        entry
        for entry in (_parse_entry(chunk) for chunk in data.split(RECORD_SEPARATOR))
        if entry is not None
    ]

    commits: List[CommitRecord] = []
    for idx, entry in enumerate(entries):
        if idx + 1 < len(entries):
            previous_sha: Optional[str] = entries[idx + 1].sha
        elif entry.status == "A":
            previous_sha = None
        else:
            previous_sha = f"{entry.sha}^"

        commits.append(
            CommitRecord(
                sha=entry.sha,
                repo_path=repo_path,
                file_name=entry.file_name,
                previous_sha=previous_sha,
                previous_file_name=entry.original_name,
                status=entry.status,
                is_file=True,
            )
        )

    return commits

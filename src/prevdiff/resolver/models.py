"""Resolver input and output models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from prevdiff.git.models import CommitRecord


@dataclass(frozen=True)
class RevisionQuery:
    """Which file, at which revision, to find the previous comparison for."""

    file_path: str  # relative to repo_path
    repo_path: str
    starting_revision: Optional[str] = None  # None = working tree
    in_diff_view: bool = False
    line_hint: int = 0
    commit: Optional[CommitRecord] = None  # already-known commit, if any


@dataclass(frozen=True)
class ComparisonSide:
    """A revision (or sentinel) plus the file path at that revision."""

    revision: str
    path: str


@dataclass(frozen=True)
class ResolvedComparison:
    """Older state on the left, newer on the right."""

    repo_path: str
    left: ComparisonSide
    right: ComparisonSide


@dataclass(frozen=True)
class DiffRequest:
    """What gets handed to whatever presents the diff."""

    repo_path: str
    left: ComparisonSide
    right: ComparisonSide
    line: int = 0

    @classmethod
    def from_comparison(cls, comparison: ResolvedComparison, line: int = 0) -> "DiffRequest":
        return cls(
            repo_path=comparison.repo_path,
            left=comparison.left,
            right=comparison.right,
            line=line,
        )

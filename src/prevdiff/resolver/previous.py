"""Previous-revision resolution.

Given a file and an optional starting revision, work out which two states
of the file a "compare with previous" should show. The decision runs in
four steps, each a method below:

1. normalise the starting revision (sentinels, diff-view offset)
2. find the target commit in the file's history, recovering from renames
3. look at the working tree when no revision was given
4. fall back to the target commit against its own predecessor
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol

from prevdiff.git.models import (
    DELETED_OR_MISSING,
    STAGED_UNCOMMITTED,
    WORKING_TREE,
    CommitRecord,
    FileStatus,
    is_staged_uncommitted,
)
from prevdiff.resolver.errors import (
    LookupFailure,
    NoPreviousRevision,
    NotTracked,
    ResolveError,
)
from prevdiff.resolver.models import ComparisonSide, ResolvedComparison, RevisionQuery

logger = logging.getLogger(__name__)

PARENT_SUFFIX = "^"
PRIMARY_LOOKUP_ENTRIES = 2
RENAME_LOOKUP_ENTRIES = 3


class HistoryProvider(Protocol):
    def get_history_for_file(
        self,
        repo_path: str,
        file_path: str,
        *,
        max_entries: int,
        ref: Optional[str] = None,
        follow_renames: bool = True,
    ) -> Optional[List[CommitRecord]]: ...


class StatusProvider(Protocol):
    def get_status_for_file(self, repo_path: str, file_path: str) -> Optional[FileStatus]: ...


class WorkingTreeDiff(Protocol):
    def compare_with_working(
        self, repo_path: str, file_path: str, commit: CommitRecord
    ) -> ResolvedComparison: ...


class WorkingTreeComparer:
    """Compare a commit's version of a file with the file on disk."""

    def compare_with_working(
        self, repo_path: str, file_path: str, commit: CommitRecord
    ) -> ResolvedComparison:
        return ResolvedComparison(
            repo_path=repo_path,
            left=ComparisonSide(commit.sha, commit.file_name),
            right=ComparisonSide(WORKING_TREE, file_path),
        )


@dataclass(frozen=True)
class _Start:
    """Where the history lookup begins."""

    lookup: Optional[str]  # revision handed to the history query
    original: Optional[str]  # same, before the diff-view offset
    file_revision: Optional[str]  # revision the file itself was opened at
    staged: bool  # the caller asked about the staged version

    @property
    def wants_parent(self) -> bool:
        return self.lookup is not None and self.lookup.endswith(PARENT_SUFFIX)


def default_comparison(commit: CommitRecord) -> ResolvedComparison:
    """The commit's version of the file against the version before it."""
    previous = commit.previous_sha if commit.previous_sha is not None else DELETED_OR_MISSING
    return ResolvedComparison(
        repo_path=commit.repo_path,
        left=ComparisonSide(previous, commit.previous_path),
        right=ComparisonSide(commit.sha, commit.file_name),
    )


class PreviousRevisionResolver:
    """Find the comparison a "diff with previous" should open.

    Usage::

        resolver = PreviousRevisionResolver(provider, provider)
        comparison = resolver.resolve(RevisionQuery("src/app.py", "/repo"))
    """

    def __init__(
        self,
        history: HistoryProvider,
        status: StatusProvider,
        working_tree: Optional[WorkingTreeDiff] = None,
    ) -> None:
        self._history = history
        self._status = status
        self._working_tree = working_tree or WorkingTreeComparer()

    def resolve(self, query: RevisionQuery) -> ResolvedComparison:
        """Return the comparison for *query*.

        Raises NotTracked, NoPreviousRevision or LookupFailure.
        """
        if query.commit is not None and query.commit.is_file:
            return default_comparison(query.commit)

        sha = query.commit.sha if query.commit is not None else query.starting_revision
        if sha == DELETED_OR_MISSING:
            raise NoPreviousRevision(f"{query.file_path} does not exist at the requested revision")

        start = self._normalise(query, sha)

        try:
            target = self._find_target(query, start)
            comparison = self._compare_working_tree(query, start, target)
        except ResolveError:
            raise
        except Exception as exc:
            logger.exception(
                "history lookup failed for %s in %s", query.file_path, query.repo_path
            )
            raise LookupFailure(
                f"lookup failed for {query.file_path} in {query.repo_path}: {exc}"
            ) from exc

        if comparison is not None:
            return comparison
        return default_comparison(target)

    # ---- step 1: starting point ----

    @staticmethod
    def _normalise(query: RevisionQuery, sha: Optional[str]) -> _Start:
        file_revision = query.starting_revision
        staged = False
        if is_staged_uncommitted(sha):
            # The staged version has no history of its own; start from the working tree
            sha = file_revision = None
            staged = True

        lookup = sha
        if query.in_diff_view and sha is not None:
            # A diff view already shows sha against its parent, so step back one more
            lookup = f"{sha}{PARENT_SUFFIX}"
            logger.debug("in diff view, looking up %s instead of %s", lookup, sha)

        return _Start(lookup=lookup, original=sha, file_revision=file_revision, staged=staged)

    # ---- step 2: target commit ----

    def _find_target(self, query: RevisionQuery, start: _Start) -> CommitRecord:
        log = self._history.get_history_for_file(
            query.repo_path,
            query.file_path,
            max_entries=PRIMARY_LOOKUP_ENTRIES,
            ref=start.lookup,
            follow_renames=True,
        )
        if log:
            return _find_commit(log, start.lookup) or log[0]

        # A parent lookup comes back empty when the file was renamed right there
        if not start.wants_parent:
            raise NotTracked(f"{query.file_path} has no history in {query.repo_path}")
        return self._recover_rename(query, start)

    def _recover_rename(self, query: RevisionQuery, start: _Start) -> CommitRecord:
        logger.debug("no history at %s, retrying from %s", start.lookup, start.original)
        log = self._history.get_history_for_file(
            query.repo_path,
            query.file_path,
            max_entries=RENAME_LOOKUP_ENTRIES,
            ref=start.original,
            follow_renames=True,
        )
        if not log:
            raise NotTracked(f"{query.file_path} has no history in {query.repo_path}")

        # Heuristic: the entry after the starting commit is the one before the rename
        target = log[1] if len(log) > 1 else log[0]
        if target.sha == start.original:
            raise NoPreviousRevision(f"nothing precedes {start.original} for {query.file_path}")
        return target

    # ---- step 3: working tree ----

    def _compare_working_tree(
        self, query: RevisionQuery, start: _Start, target: CommitRecord
    ) -> Optional[ResolvedComparison]:
        if start.file_revision is not None:
            return None

        status = self._status.get_status_for_file(query.repo_path, query.file_path)
        if status is None:
            return None

        in_diff = query.in_diff_view

        if start.staged:
            if in_diff:
                previous = target.previous_sha or DELETED_OR_MISSING
                left = ComparisonSide(previous, target.previous_path)
                right = ComparisonSide(target.sha, target.file_name)
            else:
                left = ComparisonSide(target.sha, target.file_name)
                right = ComparisonSide(STAGED_UNCOMMITTED, target.file_name)
            return ResolvedComparison(target.repo_path, left, right)

        if status.has_index_entry:
            left = ComparisonSide(target.sha if in_diff else STAGED_UNCOMMITTED, target.file_name)
            right = ComparisonSide(STAGED_UNCOMMITTED if in_diff else WORKING_TREE, target.file_name)
            return ResolvedComparison(target.repo_path, left, right)

        if not in_diff:
            logger.debug("%s has unstaged changes, comparing with working tree", query.file_path)
            return self._working_tree.compare_with_working(
                query.repo_path, query.file_path, target
            )

        return None


def _find_commit(log: List[CommitRecord], sha: Optional[str]) -> Optional[CommitRecord]:
    if not sha:
        return None
    return next((c for c in log if c.sha == sha), None)

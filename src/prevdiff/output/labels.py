"""Human-readable names for revisions and sentinels."""

from __future__ import annotations

from prevdiff.git.models import DELETED_OR_MISSING, STAGED_UNCOMMITTED, WORKING_TREE

_SENTINEL_LABELS = {
    DELETED_OR_MISSING: "(deleted)",
    STAGED_UNCOMMITTED: "(index)",
    WORKING_TREE: "(working tree)",
}


def revision_label(revision: str, *, short: bool = True) -> str:
    """Return a display name for *revision*: a sentinel label or a (short) sha."""
    if revision in _SENTINEL_LABELS:
        return _SENTINEL_LABELS[revision]
    if short and not revision.endswith("^"):
        return revision[:8]
    return revision

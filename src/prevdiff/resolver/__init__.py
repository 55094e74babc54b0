"""Previous-revision resolution — query/result models, errors, resolver."""

from prevdiff.resolver.errors import (
    LookupFailure,
    NoPreviousRevision,
    NotTracked,
    ResolveError,
)
from prevdiff.resolver.models import (
    ComparisonSide,
    DiffRequest,
    ResolvedComparison,
    RevisionQuery,
)
from prevdiff.resolver.previous import (
    PreviousRevisionResolver,
    WorkingTreeComparer,
    default_comparison,
)

__all__ = [
    "ComparisonSide",
    "DiffRequest",
    "LookupFailure",
    "NoPreviousRevision",
    "NotTracked",
    "PreviousRevisionResolver",
    "ResolveError",
    "ResolvedComparison",
    "RevisionQuery",
    "WorkingTreeComparer",
    "default_comparison",
]

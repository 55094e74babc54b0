"""Resolver failures, each with a message fit to show the user."""

from __future__ import annotations


class ResolveError(Exception):
    """Base class for everything ``PreviousRevisionResolver.resolve`` raises."""

    user_message = "Unable to open compare."

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or self.user_message)
        self.detail = detail


class NotTracked(ResolveError):
    """The file has no history at this path."""

    user_message = "Unable to open compare. The file is not under source control."


class NoPreviousRevision(ResolveError):
    """History exists but nothing precedes the requested revision."""

    user_message = "The commit has no previous commit to compare with."


class LookupFailure(ResolveError):
    """A history or status lookup failed."""

    user_message = "Unable to open compare. See the log for more details."

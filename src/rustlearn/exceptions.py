"""Exception hierarchy for the rustlearn lesson runner.

All rustlearn-specific exceptions inherit from :class:`RustLearnError` so
that callers can catch a single base class when they do not care about the
specific failure mode.
"""

from __future__ import annotations


class RustLearnError(Exception):
    """Base exception for all rustlearn operations."""


class CatalogError(RustLearnError):
    """Raised when a lesson catalog can not be constructed.

    Examples include two entries sharing an identifier, an empty
    identifier, or an identifier that shadows the quit token.
    """


class DispatcherError(RustLearnError):
    """Raised when the dispatcher is used outside its state machine."""


class InputClosedError(DispatcherError):
    """Raised when the blocking line read on standard input fails.

    This happens when the stream is exhausted or closed. The dispatcher
    treats it as fatal and never retries.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"Unable to read input: {reason}")
        self.reason = reason

"""Custom exception hierarchy for lodash-lite.

Every error raised by a helper inherits from :class:`LodashLiteError`.
Out-of-range *access* never raises; it returns
:data:`~lodash_lite.core.models.ABSENT` instead. The hierarchy covers
arguments that break a helper's contract and the command line's own
failures.

Hierarchy
---------
LodashLiteError
├── InvalidArgumentError            (also a ValueError)
│   └── UnsupportedCollectionError  (also a TypeError)
├── CliUsageError
│   ├── UnknownHelperError
│   └── ArgumentDecodeError
└── RichUnavailableError
"""

from __future__ import annotations


class LodashLiteError(Exception):
    """Base exception for all lodash-lite errors.

    The CLI error boundary renders ``str(exc)`` and, when present,
    :attr:`hint` without a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Helper arguments ------------------------------------------------------

class InvalidArgumentError(LodashLiteError, ValueError):
    """Raised when a size, count, index or callback breaks a helper's contract."""


class UnsupportedCollectionError(InvalidArgumentError, TypeError):
    """Raised when a collection helper gets neither a sequence nor a mapping."""


# --- Command line ----------------------------------------------------------

class CliUsageError(LodashLiteError):
    """Raised when the command line cannot be turned into a helper call."""


class UnknownHelperError(CliUsageError):
    """Raised when the requested helper name is not exposed on the CLI."""


class ArgumentDecodeError(CliUsageError):
    """Raised when a positional CLI argument is not valid JSON."""


# --- Environment -----------------------------------------------------------

class RichUnavailableError(LodashLiteError):
    """Raised when Rich is required for rendering but cannot be imported."""

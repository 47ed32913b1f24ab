"""Error types raised by ghstatus components.

Every error is fatal to the current invocation; the CLI reports it on
stderr and exits with ``exit_code``.
"""

from __future__ import annotations


class StatusToolError(Exception):
    exit_code = 1


class UsageError(StatusToolError):
    """Bad or missing command or identifier."""


class ValidationError(StatusToolError):
    """One or more required flags are missing."""

    def __init__(self, issues: list[str]) -> None:
        self.issues = list(issues)
        super().__init__(f"{len(self.issues)} required field(s) missing")


class PreconditionError(StatusToolError):
    """The environment is not set up to run (e.g. no access token)."""


class TransportError(StatusToolError):
    """The HTTP call failed or returned a non-2xx status."""

    def __init__(self, message: str, status: int | None = None) -> None:
        self.status = status
        super().__init__(message)


class ParseError(StatusToolError):
    """The response body did not have the expected shape."""

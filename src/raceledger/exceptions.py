"""Custom exceptions for raceledger."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from raceledger.validation import ValidationFailure


class RaceLedgerError(Exception):
    """Base exception for all raceledger errors."""


class RaceLedgerConnectionError(RaceLedgerError):
    """Raised when the client cannot connect to the league API."""


class RaceLedgerTimeoutError(RaceLedgerError):
    """Raised when a request to the league API times out."""


class RaceLedgerAPIError(RaceLedgerError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class RaceLedgerValidationError(RaceLedgerError):
    """Raised when API response data fails model validation."""


class InvalidEditError(RaceLedgerError):
    """Raised when an editor mutation targets an unknown row or a read-only field."""


class ResultsValidationError(RaceLedgerError):
    """Raised when a result set cannot be finalized."""

    def __init__(self, failure: ValidationFailure) -> None:
        self.failure = failure
        super().__init__(failure.message)


class OperationFailedError(RaceLedgerError):
    """A collaborator fetch or save failed. The cause is chained and logged."""

"""Domain exceptions.

Each error carries a stable ``code`` that the service layer copies into
``ServiceError.code``, plus free-form ``detail`` for the offending field.
"""

from __future__ import annotations

from typing import Any, ClassVar


class CatchupError(Exception):
    """Base class for every error raised by the domain layer."""

    code: ClassVar[str] = "CATCHUP_ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail


class InvalidInputError(CatchupError, ValueError):
    """Participant identifiers (or horizon) rejected before derivation."""

    code = "INVALID_INPUT"


class InvalidYearError(CatchupError, ValueError):
    """Year outside the supported four-digit Gregorian range."""

    code = "INVALID_YEAR"


class HashingUnavailableError(CatchupError, RuntimeError):
    """The digest primitive cannot be obtained on this host.

    Never replaced by a weaker random source: the same inputs must always
    produce the same schedule, or nothing at all.
    """

    code = "HASHING_UNAVAILABLE"

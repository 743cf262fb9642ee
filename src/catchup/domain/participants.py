"""Participant identifiers — normalization and email-shape validation.

Identifiers are trimmed and lower-cased before validation so that
``" Alice@Example.com "`` and ``"alice@example.com"`` derive the same
schedule.
"""

from __future__ import annotations

import re
from typing import Self

from pydantic import BaseModel, field_validator

from catchup.domain.errors import InvalidInputError

# non-empty local part @ non-empty domain containing a dot
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def normalize_email(raw: str) -> str:
    return raw.strip().lower()


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None


class ParticipantPair(BaseModel):
    """Two normalized participant identifiers.

    Order is significant for seed construction: ``first`` is the organizer
    in exported calendars, ``second`` the invited attendee.
    """

    model_config = {"frozen": True}

    first: str
    second: str

    @field_validator("first", "second", mode="before")
    @classmethod
    def _normalize(cls, value: object) -> object:
        if isinstance(value, str):
            value = normalize_email(value)
            if not is_valid_email(value):
                msg = f"{value!r} is not a valid email address"
                raise ValueError(msg)
        return value

    @classmethod
    def from_raw(cls, raw_first: str | None, raw_second: str | None) -> Self:
        """Normalize and validate free-text input.

        Raises:
            InvalidInputError: either value is empty or not email-shaped.
        """
        first = normalize_email(raw_first or "")
        second = normalize_email(raw_second or "")
        if not first or not second:
            missing = [
                name for name, value in (("first", first), ("second", second)) if not value
            ]
            raise InvalidInputError("Please enter both email addresses", missing=missing)

        invalid = {
            name: value
            for name, value in (("first", first), ("second", second))
            if not is_valid_email(value)
        }
        if invalid:
            raise InvalidInputError("Please enter valid email addresses", invalid=invalid)
        return cls(first=first, second=second)

    @property
    def emails(self) -> tuple[str, str]:
        return (self.first, self.second)

    @property
    def usernames(self) -> tuple[str, str]:
        """Local parts of both addresses, used in event titles."""
        return (self.first.split("@", 1)[0], self.second.split("@", 1)[0])

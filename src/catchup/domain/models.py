"""Derived schedule models.

INVARIANT: within a YearlyEventPair, ``first <= second`` and both
instants fall inside the pair's year (UTC).
INVARIANT: a Schedule lists consecutive years in ascending order.
"""

from __future__ import annotations

from datetime import datetime
from typing import Self

from pydantic import BaseModel, model_validator

from catchup.domain.calendar import in_year
from catchup.domain.participants import ParticipantPair


class YearlyEventPair(BaseModel):
    """The two catch-up instants derived for one year."""

    model_config = {"frozen": True}

    year: int
    first: datetime
    second: datetime

    @model_validator(mode="after")
    def _check_invariants(self) -> Self:
        for name in ("first", "second"):
            ts: datetime = getattr(self, name)
            if ts.tzinfo is None:
                msg = f"{name} must be timezone-aware"
                raise ValueError(msg)
            if not in_year(ts, self.year):
                msg = f"{name} ({ts.isoformat()}) is outside {self.year}"
                raise ValueError(msg)
        if self.first > self.second:
            msg = "first must not be later than second"
            raise ValueError(msg)
        return self

    @property
    def timestamps(self) -> tuple[datetime, datetime]:
        return (self.first, self.second)

    @property
    def coincident(self) -> bool:
        """Both hashes landed on the same hour-of-year."""
        return self.first == self.second


class Schedule(BaseModel):
    """Event pairs for a contiguous run of years, oldest first."""

    model_config = {"frozen": True}

    participants: ParticipantPair
    events: tuple[YearlyEventPair, ...]

    @model_validator(mode="after")
    def _check_years(self) -> Self:
        years = [event.year for event in self.events]
        if years and years != list(range(years[0], years[0] + len(years))):
            msg = f"Schedule years must be consecutive and ascending, got {years}"
            raise ValueError(msg)
        return self

    @property
    def start_year(self) -> int | None:
        return self.events[0].year if self.events else None

    @property
    def horizon(self) -> int:
        return len(self.events)

    @property
    def years(self) -> list[int]:
        return [event.year for event in self.events]

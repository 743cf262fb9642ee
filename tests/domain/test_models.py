"""Tests for YearlyEventPair and Schedule invariants."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from catchup.domain.models import Schedule, YearlyEventPair
from catchup.domain.participants import ParticipantPair


def _pair(year: int, first_hour: int = 1, second_hour: int = 2) -> YearlyEventPair:
    return YearlyEventPair(
        year=year,
        first=datetime(year, 1, 1, first_hour, tzinfo=UTC),
        second=datetime(year, 1, 1, second_hour, tzinfo=UTC),
    )


class TestYearlyEventPair:
    def test_valid(self) -> None:
        pair = _pair(2025)
        assert pair.timestamps == (pair.first, pair.second)
        assert not pair.coincident

    def test_equal_timestamps_allowed(self) -> None:
        assert _pair(2025, 3, 3).coincident

    def test_rejects_reversed_order(self) -> None:
        with pytest.raises(ValidationError, match="first must not be later"):
            _pair(2025, 5, 2)

    def test_rejects_naive_datetimes(self) -> None:
        with pytest.raises(ValidationError, match="timezone-aware"):
            YearlyEventPair(
                year=2025,
                first=datetime(2025, 1, 1),
                second=datetime(2025, 1, 2),
            )

    def test_rejects_timestamps_outside_year(self) -> None:
        with pytest.raises(ValidationError, match="outside 2025"):
            YearlyEventPair(
                year=2025,
                first=datetime(2025, 6, 1, tzinfo=UTC),
                second=datetime(2026, 1, 1, tzinfo=UTC),
            )

    def test_frozen(self) -> None:
        pair = _pair(2025)
        with pytest.raises(ValidationError):
            pair.year = 2026  # type: ignore[misc]


class TestSchedule:
    def test_properties(self, participants: ParticipantPair) -> None:
        schedule = Schedule(participants=participants, events=(_pair(2025), _pair(2026)))
        assert schedule.start_year == 2025
        assert schedule.horizon == 2
        assert schedule.years == [2025, 2026]

    def test_empty(self, participants: ParticipantPair) -> None:
        schedule = Schedule(participants=participants, events=())
        assert schedule.start_year is None
        assert schedule.horizon == 0

    def test_rejects_gaps(self, participants: ParticipantPair) -> None:
        with pytest.raises(ValidationError, match="consecutive"):
            Schedule(participants=participants, events=(_pair(2025), _pair(2027)))

    def test_rejects_descending(self, participants: ParticipantPair) -> None:
        with pytest.raises(ValidationError):
            Schedule(participants=participants, events=(_pair(2026), _pair(2025)))

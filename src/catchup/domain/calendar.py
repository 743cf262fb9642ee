"""Calendar arithmetic and timestamp formatting.

All instants are anchored to UTC. An *hour-of-year* is the integer
offset in hours from midnight UTC on January 1.
"""

from __future__ import annotations

from datetime import MAXYEAR, UTC, datetime, timedelta

from catchup.domain.errors import InvalidYearError

HOURS_IN_YEAR = 8760  # 365 * 24
HOURS_IN_LEAP_YEAR = 8784  # 366 * 24

MIN_YEAR = 1000
MAX_YEAR = MAXYEAR

BASIC_FORMAT = "%Y%m%dT%H%M%SZ"


def check_year(year: int) -> int:
    """Return *year* unchanged, or raise InvalidYearError."""
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidYearError(f"Year must be an integer, got {year!r}", year=year)
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidYearError(
            f"Year {year} is outside the supported range {MIN_YEAR}-{MAX_YEAR}",
            year=year,
        )
    return year


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4, except centuries not divisible by 400."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def hours_in_year(year: int) -> int:
    return HOURS_IN_LEAP_YEAR if is_leap_year(year) else HOURS_IN_YEAR


def start_of_year(year: int) -> datetime:
    """Midnight UTC on January 1 of *year*."""
    return datetime(check_year(year), 1, 1, tzinfo=UTC)


def hour_to_timestamp(hour_of_year: int, year: int) -> datetime:
    """Map an hour-of-year offset to an absolute UTC instant."""
    if not 0 <= hour_of_year < hours_in_year(year):
        msg = f"Hour {hour_of_year} is not within year {year}"
        raise ValueError(msg)
    return start_of_year(year) + timedelta(hours=hour_of_year)


def in_year(ts: datetime, year: int) -> bool:
    """True when *ts* falls in ``[year-01-01T00:00Z, (year+1)-01-01T00:00Z)``."""
    return ts.astimezone(UTC).year == year


def format_basic(ts: datetime) -> str:
    """Compact UTC basic format used by iCalendar and calendar links."""
    return ts.astimezone(UTC).strftime(BASIC_FORMAT)


def format_human(ts: datetime) -> str:
    """Long-form English rendering, e.g. ``Thursday, March 6, 2025 at 02:00 PM UTC``."""
    ts = ts.astimezone(UTC)
    return f"{ts:%A}, {ts:%B} {ts.day}, {ts.year} at {ts:%I:%M %p} UTC"


def event_end(start: datetime, duration: timedelta) -> datetime:
    """``start + duration``, or InvalidYearError when that passes year 9999."""
    try:
        return start + duration
    except OverflowError as exc:
        raise InvalidYearError(
            f"An event starting {format_basic(start)} would end after year {MAX_YEAR}",
            year=start.year,
        ) from exc

"""ScheduleService — derive a multi-year catch-up schedule.

Per-year derivations are independent, so they are issued as concurrent
tasks and joined with ``asyncio.gather``. Gather returns results in
submission order, which keeps the schedule ascending by year no matter
which digest finishes first.
"""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from typing import Any

import structlog

from catchup.domain.calendar import check_year, format_human
from catchup.domain.derivation import DEFAULT_DIGEST, check_digest, derive_async
from catchup.domain.errors import CatchupError, InvalidInputError
from catchup.domain.links import pair_urls
from catchup.domain.models import Schedule
from catchup.domain.participants import ParticipantPair
from catchup.services.base import BaseService
from catchup.services.result import ServiceResult
from catchup.services.telemetry import trace_span, traced

log = structlog.get_logger(__name__)


def current_year() -> int:
    return datetime.now(UTC).year


async def build_schedule(
    participants: ParticipantPair,
    start_year: int,
    horizon_years: int,
    *,
    algorithm: str = DEFAULT_DIGEST,
) -> Schedule:
    """Derive ``horizon_years`` consecutive years starting at *start_year*.

    Raises:
        InvalidInputError: horizon is not a positive integer.
        InvalidYearError: any year in the range is unsupported.
        HashingUnavailableError: the digest algorithm is missing.
    """
    if horizon_years < 1:
        raise InvalidInputError(
            f"Horizon must be at least one year, got {horizon_years}",
            horizon=horizon_years,
        )
    check_year(start_year)
    check_year(start_year + horizon_years - 1)
    check_digest(algorithm)

    first, second = participants.emails
    events = await asyncio.gather(
        *(
            derive_async(first, second, start_year + offset, algorithm=algorithm)
            for offset in range(horizon_years)
        )
    )
    return Schedule(participants=participants, events=tuple(events))


def build_schedule_sync(
    participants: ParticipantPair,
    start_year: int,
    horizon_years: int,
    *,
    algorithm: str = DEFAULT_DIGEST,
) -> Schedule:
    """Blocking wrapper around :func:`build_schedule`."""
    return asyncio.run(
        build_schedule(participants, start_year, horizon_years, algorithm=algorithm)
    )


class ScheduleService(BaseService):
    """Validate participants and derive their schedule."""

    def build(
        self,
        email_a: str | None,
        email_b: str | None,
        *,
        start_year: int | None = None,
        horizon: int | None = None,
    ) -> Schedule:
        """Validate input and derive a fresh schedule.

        Falls back to the current UTC year and the configured horizon.
        Raises CatchupError subclasses; see :func:`build_schedule`.
        """
        participants = ParticipantPair.from_raw(email_a, email_b)
        start = current_year() if start_year is None else start_year
        years = self._settings.schedule.horizon_years if horizon is None else horizon

        with trace_span("build_schedule") as span:
            schedule = build_schedule_sync(
                participants, start, years, algorithm=self._settings.schedule.digest
            )
            if span:
                span.annotate("years", schedule.horizon)

        log.debug(
            "schedule.built",
            start_year=schedule.start_year,
            horizon=schedule.horizon,
            coincident=[pair.year for pair in schedule.events if pair.coincident],
        )
        return schedule

    def _describe(self, schedule: Schedule, title: str) -> list[dict[str, Any]]:
        participants = schedule.participants
        events: list[dict[str, Any]] = []
        for pair in schedule.events:
            first_url, second_url = pair_urls(
                pair,
                participants,
                title=title,
                description=self.templates.description(participants, pair.year),
                duration=self.event_duration,
                base_url=self._settings.calendar.provider_url,
            )
            events.append(
                {
                    "year": pair.year,
                    "first": pair.first.isoformat(),
                    "second": pair.second.isoformat(),
                    "first_human": format_human(pair.first),
                    "second_human": format_human(pair.second),
                    "first_url": first_url,
                    "second_url": second_url,
                }
            )
        return events

    @traced
    def generate(
        self,
        email_a: str | None,
        email_b: str | None,
        *,
        start_year: int | None = None,
        horizon: int | None = None,
    ) -> ServiceResult:
        """Derive a schedule and describe every event for display."""
        try:
            schedule = self.build(email_a, email_b, start_year=start_year, horizon=horizon)
            title = self.templates.title(schedule.participants)
            events = self._describe(schedule, title)
        except CatchupError as exc:
            return self._failure("schedule", exc)

        return ServiceResult(
            ok=True,
            op="schedule",
            data={
                "participants": list(schedule.participants.emails),
                "title": title,
                "start_year": schedule.start_year,
                "horizon": schedule.horizon,
                "events": events,
            },
            warnings=[
                f"Both catch-ups in {pair.year} fall on the same hour"
                for pair in schedule.events
                if pair.coincident
            ],
        )

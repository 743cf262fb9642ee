"""ExportService — iCalendar documents and calendar deep links.

Both exports derive a fresh schedule from the given participants; no
schedule is ever cached between invocations.
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

from catchup.domain.calendar import format_basic
from catchup.domain.errors import CatchupError
from catchup.domain.ics import MIME_TYPE, render_ics, suggested_filename
from catchup.domain.links import google_calendar_url
from catchup.services.base import BaseService
from catchup.services.result import ServiceResult
from catchup.services.schedule import ScheduleService
from catchup.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from catchup.domain.models import Schedule

log = structlog.get_logger(__name__)


class ExportService(BaseService):
    """Export a derived schedule in calendar-importable formats."""

    def _schedule(
        self,
        email_a: str | None,
        email_b: str | None,
        start_year: int | None,
        horizon: int | None,
    ) -> Schedule:
        return ScheduleService(self._settings).build(
            email_a, email_b, start_year=start_year, horizon=horizon
        )

    def render_calendar(self, schedule: Schedule, *, now: datetime | None = None) -> str:
        """Render *schedule* as an iCalendar document using configured options."""
        calendar = self._settings.calendar
        participants = schedule.participants
        return render_ics(
            schedule,
            title=self.templates.title(participants),
            describe=lambda year: self.templates.description(participants, year),
            now=now or datetime.now(UTC),
            duration=self.event_duration,
            prodid=calendar.prodid,
            method=calendar.method,
            uid_domain=calendar.uid_domain,
        )

    @traced
    def export_ics(
        self,
        email_a: str | None,
        email_b: str | None,
        *,
        output: Path | None = None,
        start_year: int | None = None,
        horizon: int | None = None,
        now: datetime | None = None,
    ) -> ServiceResult:
        """Render the schedule as one ``.ics`` document.

        Writes to *output* when given; otherwise the document is returned
        in ``data["content"]`` for the caller to print.
        """
        try:
            schedule = self._schedule(email_a, email_b, start_year, horizon)
            with trace_span("render_ics"):
                content = self.render_calendar(schedule, now=now)
        except CatchupError as exc:
            return self._failure("export_ics", exc)

        payload: dict[str, Any] = {
            "filename": suggested_filename(schedule.horizon),
            "mime_type": MIME_TYPE,
            "start_year": schedule.start_year,
            "horizon": schedule.horizon,
            "event_count": 2 * schedule.horizon,
        }

        if output is None:
            payload["content"] = content
        else:
            if output.is_dir():
                output = output / payload["filename"]
            try:
                output.parent.mkdir(parents=True, exist_ok=True)
                # newline="" keeps the CRLF terminators intact on every platform
                with output.open("w", encoding="utf-8", newline="") as fh:
                    fh.write(content)
            except OSError as exc:
                log.warning("export.write_failed", path=str(output), error=str(exc))
                return ServiceResult.failure(
                    "export_ics",
                    "WRITE_FAILED",
                    f"Could not write {output}: {exc.strerror or exc}",
                    path=str(output),
                )
            payload["output_file"] = str(output)

        return ServiceResult(ok=True, op="export_ics", data=payload)

    def _links(self, schedule: Schedule) -> list[dict[str, Any]]:
        participants = schedule.participants
        title = self.templates.title(participants)
        links: list[dict[str, Any]] = []
        for pair in schedule.events:
            description = self.templates.description(participants, pair.year)
            for which, start in zip(("first", "second"), pair.timestamps, strict=True):
                url = google_calendar_url(
                    start,
                    participants,
                    title=title,
                    description=description,
                    duration=self.event_duration,
                    base_url=self._settings.calendar.provider_url,
                )
                links.append(
                    {"year": pair.year, "which": which, "start": format_basic(start), "url": url}
                )
        return links

    @traced
    def export_links(
        self,
        email_a: str | None,
        email_b: str | None,
        *,
        start_year: int | None = None,
        horizon: int | None = None,
    ) -> ServiceResult:
        """Build one "create event" URL per derived instant."""
        try:
            links = self._links(self._schedule(email_a, email_b, start_year, horizon))
        except CatchupError as exc:
            return self._failure("export_links", exc)

        return ServiceResult(
            ok=True,
            op="export_links",
            data={"count": len(links), "links": links},
        )

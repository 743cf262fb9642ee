"""Provider "create event" deep links (Google Calendar template URLs)."""

from __future__ import annotations

from datetime import datetime, timedelta
from urllib.parse import urlencode

from catchup.domain.calendar import event_end, format_basic
from catchup.domain.models import YearlyEventPair
from catchup.domain.participants import ParticipantPair

GOOGLE_CALENDAR_URL = "https://calendar.google.com/calendar/render"
DEFAULT_EVENT_DURATION = timedelta(hours=1)


def google_calendar_url(
    start: datetime,
    participants: ParticipantPair,
    *,
    title: str,
    description: str,
    duration: timedelta = DEFAULT_EVENT_DURATION,
    base_url: str = GOOGLE_CALENDAR_URL,
) -> str:
    """Build a query-string URL that pre-fills a new event.

    Free-text fields are form-encoded (spaces as ``+``, everything else
    percent-escaped), matching what browsers send.
    """
    params = {
        "action": "TEMPLATE",
        "text": title,
        "dates": f"{format_basic(start)}/{format_basic(event_end(start, duration))}",
        "details": description,
        "add": ",".join(participants.emails),
    }
    return f"{base_url}?{urlencode(params)}"


def pair_urls(
    pair: YearlyEventPair,
    participants: ParticipantPair,
    *,
    title: str,
    description: str,
    duration: timedelta = DEFAULT_EVENT_DURATION,
    base_url: str = GOOGLE_CALENDAR_URL,
) -> tuple[str, str]:
    """URLs for the first and second catch-up of *pair*."""
    first, second = (
        google_calendar_url(
            ts,
            participants,
            title=title,
            description=description,
            duration=duration,
            base_url=base_url,
        )
        for ts in pair.timestamps
    )
    return first, second

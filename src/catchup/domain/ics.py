"""iCalendar (RFC 5545) export for a derived schedule.

One VEVENT per derived instant (two per year), wrapped in a single
VCALENDAR built with :mod:`icalendar`, which takes care of text escaping,
line folding and CRLF terminators.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

from icalendar import Calendar, Event, vCalAddress

from catchup.domain.calendar import event_end
from catchup.domain.models import Schedule
from catchup.domain.participants import ParticipantPair

DEFAULT_PRODID = "-//6 Month Catchup//Random Scheduler//EN"
DEFAULT_UID_DOMAIN = "6monthcatchup.github.io"
DEFAULT_METHOD = "REQUEST"
DEFAULT_EVENT_DURATION = timedelta(hours=1)

MIME_TYPE = "text/calendar;charset=utf-8"


def suggested_filename(horizon: int) -> str:
    return f"random-catchup-{horizon}-years.ics"


def _mailto(email: str) -> vCalAddress:
    return vCalAddress(f"mailto:{email}")


def _build_event(
    start: datetime,
    *,
    participants: ParticipantPair,
    title: str,
    description: str,
    now: datetime,
    uid: str,
    duration: timedelta,
) -> Event:
    event = Event()
    event.add("dtstart", start)
    event.add("dtend", event_end(start, duration))
    event.add("dtstamp", now)
    event.add("uid", uid)
    event.add("organizer", _mailto(participants.first))
    event.add("summary", title)
    event.add("description", description)
    event.add(
        "attendee",
        _mailto(participants.first),
        parameters={"ROLE": "REQ-PARTICIPANT", "PARTSTAT": "ACCEPTED", "RSVP": "FALSE"},
    )
    event.add(
        "attendee",
        _mailto(participants.second),
        parameters={"ROLE": "REQ-PARTICIPANT", "PARTSTAT": "NEEDS-ACTION", "RSVP": "TRUE"},
    )
    event.add("status", "CONFIRMED")
    event.add("sequence", 0)
    return event


def build_calendar(
    schedule: Schedule,
    *,
    title: str,
    describe: Callable[[int], str],
    now: datetime,
    duration: timedelta = DEFAULT_EVENT_DURATION,
    prodid: str = DEFAULT_PRODID,
    method: str = DEFAULT_METHOD,
    uid_domain: str = DEFAULT_UID_DOMAIN,
) -> Calendar:
    """Build the VCALENDAR component for *schedule*.

    Args:
        schedule: Derived schedule; every timestamp becomes one VEVENT.
        title: SUMMARY shared by all events.
        describe: Returns the DESCRIPTION text for a given year.
        now: Generation time, used for DTSTAMP and UID.
        duration: Event length (DTEND = DTSTART + duration).

    Raises:
        InvalidYearError: an event would end after the last supported year.
    """
    cal = Calendar()
    cal.add("prodid", prodid)
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add("method", method)

    now_ms = int(now.timestamp() * 1000)
    instants = [
        (pair.year, start) for pair in schedule.events for start in pair.timestamps
    ]
    for counter, (year, start) in enumerate(instants, start=1):
        cal.add_component(
            _build_event(
                start,
                participants=schedule.participants,
                title=title,
                description=describe(year),
                now=now,
                uid=f"{now_ms}-{counter}@{uid_domain}",
                duration=duration,
            )
        )
    return cal


def render_ics(schedule: Schedule, **options: Any) -> str:
    """Serialize :func:`build_calendar` output as text (CRLF line endings)."""
    return build_calendar(schedule, **options).to_ical().decode("utf-8")

"""BaseService — shared foundation for catchup services.

Every service receives the resolved :class:`CatchupSettings` at
construction time. Services never raise domain errors to their callers:
they convert them into a failed ServiceResult.
"""

from __future__ import annotations

import logging
from datetime import timedelta
from functools import cached_property
from typing import TYPE_CHECKING

from catchup.infrastructure.templates import EventTemplates
from catchup.services.result import ServiceResult

if TYPE_CHECKING:
    from catchup.config.settings import CatchupSettings
    from catchup.domain.errors import CatchupError

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class ScheduleService(BaseService):
            def generate(self, email_a: str, email_b: str) -> ServiceResult:
                try:
                    ...
                except CatchupError as exc:
                    return self._failure("schedule", exc)
    """

    def __init__(self, settings: CatchupSettings) -> None:
        self._settings = settings

    @cached_property
    def templates(self) -> EventTemplates:
        return EventTemplates(project_root=self._settings.project_root)

    @property
    def event_duration(self) -> timedelta:
        return timedelta(minutes=self._settings.calendar.event_duration_minutes)

    def _failure(self, op: str, exc: CatchupError) -> ServiceResult:
        """Convert a domain error into a failed result."""
        logger.debug("%s failed: %s (%s)", op, exc.message, exc.code)
        return ServiceResult.failure(op, exc.code, exc.message, **exc.detail)

"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, catchup.toml only contains
overrides. A project needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- catchup.toml sections ---


class ScheduleConfig(BaseModel):
    """[schedule] section."""

    model_config = {"frozen": True}

    horizon_years: int = Field(default=10, ge=1)
    digest: str = "sha256"


class CalendarConfig(BaseModel):
    """[calendar] section."""

    model_config = {"frozen": True}

    event_duration_minutes: int = Field(default=60, ge=1)
    prodid: str = "-//6 Month Catchup//Random Scheduler//EN"
    uid_domain: str = "6monthcatchup.github.io"
    method: str = "REQUEST"
    provider_url: str = "https://calendar.google.com/calendar/render"


"""Tests for config section models."""

import pytest
from pydantic import ValidationError

from catchup.config.models import CalendarConfig, ScheduleConfig


class TestScheduleConfig:
    def test_defaults(self) -> None:
        cfg = ScheduleConfig()
        assert cfg.horizon_years == 10
        assert cfg.digest == "sha256"

    def test_horizon_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            ScheduleConfig(horizon_years=0)


class TestCalendarConfig:
    def test_defaults(self) -> None:
        cfg = CalendarConfig()
        assert cfg.event_duration_minutes == 60
        assert cfg.prodid == "-//6 Month Catchup//Random Scheduler//EN"
        assert cfg.method == "REQUEST"
        assert cfg.provider_url == "https://calendar.google.com/calendar/render"

    def test_duration_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            CalendarConfig(event_duration_minutes=0)

    def test_frozen(self) -> None:
        cfg = CalendarConfig()
        with pytest.raises(ValidationError):
            cfg.method = "PUBLISH"  # type: ignore[misc]

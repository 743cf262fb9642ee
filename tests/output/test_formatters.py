"""Tests for the format_result dispatcher and OutputSettings."""

import json

from catchup.output.formatters import OutputSettings, format_result
from catchup.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code="ERR", message=msg),
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        settings = OutputSettings(json_output=True)
        output = format_result(_ok("schedule", horizon=10), settings=settings)
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "schedule"
        assert data["data"]["horizon"] == 10

    def test_json_mode_error(self) -> None:
        settings = OutputSettings(json_output=True)
        output = format_result(_err("schedule", "Bad"), settings=settings)
        data = json.loads(output)
        assert data["ok"] is False
        assert data["error"]["message"] == "Bad"


class TestFormatResultHuman:
    def test_quiet(self) -> None:
        result = _ok("export_ics", output_file="/tmp/x.ics")
        assert format_result(result, settings=OutputSettings(quiet=True)) == "/tmp/x.ics"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok("schedule"), settings=settings))["ok"] is True

    def test_human_error(self) -> None:
        output = format_result(
            _err("schedule", "Please enter valid email addresses"), settings=OutputSettings()
        )
        assert "ERROR" in output
        assert "Please enter valid email addresses" in output

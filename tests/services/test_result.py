"""Tests for ServiceResult and ServiceError models."""

import pytest
from pydantic import ValidationError

from catchup.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_defaults(self) -> None:
        result = ServiceResult(ok=True, op="schedule")
        assert result.data == {}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="schedule")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_error_round_trips_through_json(self) -> None:
        result = ServiceResult(
            ok=False,
            op="schedule",
            error=ServiceError(code="INVALID_INPUT", message="bad", detail={"field": "first"}),
        )
        restored = ServiceResult.model_validate_json(result.model_dump_json())
        assert restored == result

    def test_failure_helper(self) -> None:
        result = ServiceResult.failure("export_ics", "WRITE_FAILED", "no space", path="/x.ics")
        assert not result.ok
        assert result.data == {}
        assert result.error == ServiceError(
            code="WRITE_FAILED", message="no space", detail={"path": "/x.ics"}
        )

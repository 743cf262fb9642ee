"""Result objects returned by every catchup service call.

Commands never see exceptions from the domain layer: they get a
ServiceResult and hand it to the output layer, which renders it for
people or dumps it as JSON.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ServiceError(BaseModel):
    """Why a call failed; ``code`` is stable, ``message`` is for people."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: False when ``error`` is set and ``data`` is empty.
        op: Operation name (``schedule``, ``export_ics``, ``export_links``).
        data: Operation payload.
        warnings: Non-fatal notes, e.g. coinciding catch-up hours.
        meta: Telemetry, present only under ``--verbose``.
    """

    model_config = ConfigDict(frozen=True)

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )

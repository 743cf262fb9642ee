"""Pick the output mode for a ServiceResult: JSON, quiet, or Rich."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from catchup.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from catchup.services.result import ServiceResult


class OutputSettings(BaseModel):
    """The ``--json``/``--quiet``/``--verbose`` flags, frozen."""

    model_config = ConfigDict(frozen=True)

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings) -> str:
    """Render *result* as text; ``--json`` wins over ``--quiet``."""
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)

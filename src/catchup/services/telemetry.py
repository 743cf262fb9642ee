"""Timing spans for ``--verbose`` output.

A ``@traced`` service call opens a root span; ``trace_span`` blocks inside
it open children. When the call returns a ServiceResult, the finished
tree lands in ``result.meta["telemetry"]``. With telemetry off every
helper is a single ContextVar read.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from catchup.services.result import ServiceResult

log = structlog.get_logger("catchup.telemetry")

_enabled: ContextVar[bool] = ContextVar("catchup_telemetry", default=False)
_active: ContextVar[Span | None] = ContextVar("catchup_active_span", default=None)

_P = ParamSpec("_P")
_R = TypeVar("_R")


@dataclass
class Span:
    """One timed block and the blocks nested inside it."""

    name: str
    started: float = field(default_factory=time.perf_counter)
    elapsed_ms: float | None = None
    annotations: dict[str, Any] = field(default_factory=dict)
    children: list[Span] = field(default_factory=list)

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def close(self) -> None:
        self.elapsed_ms = (time.perf_counter() - self.started) * 1000

    def as_dict(self) -> dict[str, Any]:
        tree: dict[str, Any] = {
            "name": self.name,
            "duration_ms": round(self.elapsed_ms or 0.0, 2),
        }
        if self.annotations:
            tree["annotations"] = dict(self.annotations)
        if self.children:
            tree["children"] = [child.as_dict() for child in self.children]
        return tree


@contextmanager
def _open(span: Span) -> Iterator[Span]:
    token = _active.set(span)
    try:
        yield span
    finally:
        span.close()
        _active.reset(token)


@contextmanager
def trace_span(name: str) -> Iterator[Span | None]:
    """Time a block as a child of the enclosing ``@traced`` call.

    Yields None when telemetry is off or no traced call is running.
    """
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return
    child = Span(name)
    parent.children.append(child)
    with _open(child):
        yield child


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:  # noqa: UP047
    """Run *func* under a root span and attach the tree to its ServiceResult."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        root = Span(func.__qualname__)
        with _open(root):
            result = func(*args, **kwargs)
        log.debug("span.closed", span=root.name, duration_ms=root.as_dict()["duration_ms"])

        if isinstance(result, ServiceResult):
            meta = {**(result.meta or {}), "telemetry": root.as_dict()}
            return result.model_copy(update={"meta": meta})  # type: ignore[return-value]
        return result

    return wrapper


def enable_telemetry() -> None:
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)

"""Verbose-mode timing for service calls.

``@traced`` opens a root span around a service method; ``trace_span`` opens
child spans inside it. Both are a single ContextVar lookup when telemetry
is off. When on (``bfn -v``), the finished span tree is attached to
``ServiceResult.meta["telemetry"]`` and each root span is logged.
"""

from __future__ import annotations

import functools
import time
from collections.abc import Callable, Generator, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, ParamSpec, TypeVar

import structlog

from bfn.services.result import ServiceResult

_enabled: ContextVar[bool] = ContextVar("bfn_telemetry_enabled", default=False)
_active: ContextVar[Span | None] = ContextVar("bfn_active_span", default=None)

_log = structlog.get_logger("bfn.telemetry")


@dataclass
class Span:
    """One timed stage; children are the stages it opened."""

    name: str
    started: float = field(default_factory=time.perf_counter)
    finished: float | None = None
    ok: bool = True
    annotations: dict[str, Any] = field(default_factory=dict)
    children: list[Span] = field(default_factory=list)

    @property
    def duration_ms(self) -> float:
        if self.finished is None:
            return 0.0
        return (self.finished - self.started) * 1000

    def end(self) -> None:
        self.finished = time.perf_counter()

    def annotate(self, key: str, value: Any) -> None:
        self.annotations[key] = value

    def iter_tree(self) -> Iterator[Span]:
        """Yield this span and every descendant, depth first."""
        yield self
        for child in self.children:
            yield from child.iter_tree()

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"name": self.name, "duration_ms": round(self.duration_ms, 3)}
        if not self.ok:
            out["ok"] = False
        if self.annotations:
            out["annotations"] = dict(self.annotations)
        if self.children:
            out["children"] = [child.to_dict() for child in self.children]
        return out


@contextmanager
def _open(span: Span) -> Generator[Span]:
    token = _active.set(span)
    try:
        yield span
    except Exception:
        span.ok = False
        raise
    finally:
        span.end()
        _active.reset(token)


@contextmanager
def trace_span(name: str) -> Generator[Span | None]:
    """Time a stage under the active span.

    Yields None when telemetry is off or nothing is being traced.
    """
    parent = _active.get() if _enabled.get() else None
    if parent is None:
        yield None
        return

    child = Span(name=name)
    parent.children.append(child)
    with _open(child) as span:
        yield span


_P = ParamSpec("_P")
_R = TypeVar("_R")


def traced(func: Callable[_P, _R]) -> Callable[_P, _R]:
    """Run *func* under a root span named after its qualified name."""

    @functools.wraps(func)
    def wrapper(*args: _P.args, **kwargs: _P.kwargs) -> _R:
        if not _enabled.get():
            return func(*args, **kwargs)

        root = Span(name=func.__qualname__)
        try:
            with _open(root):
                result = func(*args, **kwargs)
                if isinstance(result, ServiceResult):
                    root.ok = result.ok
        finally:
            _log.debug(
                "span.complete",
                span_name=root.name,
                duration_ms=round(root.duration_ms, 3),
                ok=root.ok,
                stages=sum(1 for _ in root.iter_tree()) - 1,
            )

        if isinstance(result, ServiceResult):
            meta = {**(result.meta or {}), "telemetry": root.to_dict()}
            return result.model_copy(update={"meta": meta})  # type: ignore[return-value]
        return result

    return wrapper


def enable_telemetry() -> None:
    _enabled.set(True)


def disable_telemetry() -> None:
    _enabled.set(False)

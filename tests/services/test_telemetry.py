"""Tests for telemetry spans and the @traced decorator."""

from __future__ import annotations

import pytest

from bfn.services.result import ServiceResult
from bfn.services.telemetry import (
    Span,
    disable_telemetry,
    enable_telemetry,
    trace_span,
    traced,
)


@traced
def _op() -> ServiceResult:
    with trace_span("inner") as span:
        if span is not None:
            span.annotate("k", 1)
            with trace_span("leaf"):
                pass
    return ServiceResult(ok=True, op="op", meta={"existing": True})


@traced
def _failing_op() -> ServiceResult:
    return ServiceResult.failure("op", "BAD", "bad input")


@traced
def _boom() -> ServiceResult:
    raise RuntimeError("boom")


@traced
def _plain() -> int:
    return 42


class TestSpan:
    def test_duration_before_end(self) -> None:
        assert Span(name="x").duration_ms == 0.0

    def test_to_dict(self) -> None:
        span = Span(name="x")
        span.annotate("a", 1)
        span.end()
        data = span.to_dict()
        assert data["name"] == "x"
        assert data["annotations"] == {"a": 1}
        assert data["duration_ms"] >= 0
        assert "ok" not in data
        assert "children" not in data

    def test_iter_tree_is_depth_first(self) -> None:
        root = Span(name="root")
        a, b, c = Span(name="a"), Span(name="b"), Span(name="c")
        a.children.append(b)
        root.children.extend([a, c])
        assert [s.name for s in root.iter_tree()] == ["root", "a", "b", "c"]


class TestTraced:
    def test_disabled_leaves_meta_alone(self) -> None:
        disable_telemetry()
        assert _op().meta == {"existing": True}

    def test_enabled_injects_span_tree(self) -> None:
        enable_telemetry()
        meta = _op().meta
        assert meta is not None
        assert meta["existing"] is True
        tree = meta["telemetry"]
        assert tree["name"].endswith("_op")
        inner = tree["children"][0]
        assert inner["name"] == "inner"
        assert inner["annotations"] == {"k": 1}
        assert inner["children"][0]["name"] == "leaf"

    def test_failed_result_marks_span(self) -> None:
        enable_telemetry()
        result = _failing_op()
        assert result.meta is not None
        assert result.meta["telemetry"]["ok"] is False

    def test_exceptions_propagate(self) -> None:
        enable_telemetry()
        with pytest.raises(RuntimeError, match="boom"):
            _boom()

    def test_non_result_return_passes_through(self) -> None:
        enable_telemetry()
        assert _plain() == 42

    def test_trace_span_without_parent(self) -> None:
        enable_telemetry()
        with trace_span("orphan") as span:
            assert span is None

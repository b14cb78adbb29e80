"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import date, datetime


def iso_or_none(value: date | datetime | None) -> str | None:
    """ISO 8601 text for *value*, or None when absent (JSON-friendly)."""
    if value is None:
        return None
    return value.isoformat()


def count_present(values: list[str | None]) -> int:
    """Number of entries that are not None."""
    return sum(1 for v in values if v is not None)

"""CalendarService — inclusive date ranges and month boundaries."""

from __future__ import annotations

from datetime import date

from bfn.domain.calendar import all_dates_from, first_day_of_month, last_day_of_month
from bfn.services.base import BaseService
from bfn.services.result import ServiceResult
from bfn.services.telemetry import traced


class CalendarService(BaseService):
    @traced
    def range(self, start: date, end: date) -> ServiceResult:
        """Every date from *start* to *end* inclusive (empty if reversed).

        Ranges longer than ``calendar.max_range_days`` are refused.
        """
        op = "date_range"
        limit = self._settings.calendar.max_range_days
        span_days = (end - start).days + 1
        if span_days > limit:
            return ServiceResult.failure(
                op,
                "RANGE_TOO_LARGE",
                f"Range of {span_days} days exceeds the limit of {limit}",
                start=start.isoformat(),
                end=end.isoformat(),
                max_range_days=limit,
            )

        dates = [d.isoformat() for d in all_dates_from(start, end)]
        return ServiceResult.success(op, count=len(dates), dates=dates)

    @traced
    def month_bounds(self, day: date) -> ServiceResult:
        first, last = first_day_of_month(day), last_day_of_month(day)
        return ServiceResult.success(
            "month_bounds",
            date=day.isoformat(),
            first_day=first.isoformat(),
            last_day=last.isoformat(),
            days=last.day,
        )

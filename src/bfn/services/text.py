"""TextService — trimming, whitespace collapsing, and markup stripping."""

from __future__ import annotations

from bfn.domain.text import collapse_whitespace, strip_markup, trim, upper_first
from bfn.services.base import BaseService
from bfn.services.result import ServiceResult
from bfn.services.telemetry import traced


class TextService(BaseService):
    """Applies the text sanitizers; ``None`` input means absent text."""

    @traced
    def trim(self, value: str | None) -> ServiceResult:
        return ServiceResult.success("trim", value=trim(value))

    @traced
    def squish(self, value: str | None) -> ServiceResult:
        return ServiceResult.success("san_trim", value=collapse_whitespace(value))

    @traced
    def strip_tags(self, value: str | None) -> ServiceResult:
        """Strip markup using the guillemet marks from the ``[text]`` config."""
        marks = self._settings.text
        cleaned = strip_markup(value, open_mark=marks.open_mark, close_mark=marks.close_mark)
        return ServiceResult.success("strip_tags", value=cleaned)

    @traced
    def upper_first(self, value: str) -> ServiceResult:
        return ServiceResult.success("upper_first", value=upper_first(value))

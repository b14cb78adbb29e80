"""CodeService — batch recognition of disposal, recovery, and LoW codes.

Pipeline per value: RESOLVE FAMILY -> RECOGNIZE -> REPORT.
Values that do not conform come back with ``code: null``; they are counted,
not treated as errors.
"""

from __future__ import annotations

import logging

from bfn.domain.codes import CodeFamily, recognize_by_family, resolve_family
from bfn.services._helpers import count_present
from bfn.services.base import BaseService
from bfn.services.result import ServiceResult
from bfn.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class CodeService(BaseService):
    """Recognizes environmental codes for one family at a time."""

    @traced
    def parse(self, values: list[str], family: str) -> ServiceResult:
        """Recognize every entry of *values* as a code of *family*.

        An unknown family is reported as a warning; every code is then null,
        mirroring :func:`recognize_by_family`.
        """
        op = "parse_env_code"
        warnings: list[str] = []
        resolved = resolve_family(family)
        if resolved is None:
            known = ", ".join(f.value for f in CodeFamily)
            warnings.append(f"Unknown code family {family!r} (expected one of: {known})")

        with trace_span("recognize") as span:
            codes = [recognize_by_family(value, family) for value in values]
            if span is not None:
                span.annotate("values", len(values))

        matched = count_present(codes)
        logger.debug("Recognized %d of %d value(s) as %s", matched, len(values), family)
        return ServiceResult.success(
            op,
            warnings=warnings,
            family=resolved.value if resolved else family,
            matched=matched,
            total=len(values),
            items=[{"input": v, "code": c} for v, c in zip(values, codes, strict=True)],
        )

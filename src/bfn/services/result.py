"""The envelope every service method returns.

``ok`` is about the *input*, not the answer: a value that simply does not
conform (a v4 UUID asked for its timestamp, a string that is no disposal
code) is ``ok=True`` with a null in ``data``. Only input the operation
cannot work with at all yields ``ok=False`` and a :class:`ServiceError`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Machine-readable failure: stable ``code``, human ``message``."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: False only when the input was unusable.
        op: Operation name (``"uuid_to_ts"``, ``"parse_env_code"``, ...).
        data: Operation payload; absent values are ``None``.
        warnings: Non-fatal notes for the caller.
        error: Set exactly when ``ok`` is False.
        meta: Extras such as the telemetry span tree.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def success(cls, op: str, *, warnings: list[str] | None = None, **data: Any) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))

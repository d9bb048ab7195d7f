"""What a ConversionService call hands back to the CLI.

Successful calls carry the formatted times in ``data``; failed calls carry
a :class:`ServiceError` built from the domain error that stopped them. The
exit code is derived from ``ok`` alone.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from tzc.domain.errors import ConversionError


class ServiceError(BaseModel):
    """Error code, message, and context (zone, timestamp, usage tip)."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one conversion request.

    Attributes:
        ok: False when a timestamp, zone or selection error stopped the request.
        op: ``convert``, ``convert_defaults``, ``list_zones`` or ``parse``.
        data: Formatted times and the inputs they came from.
        warnings: Per-zone failures and catalog fallbacks that did not stop it.
        error: Set exactly when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def from_error(cls, op: str, exc: ConversionError, **detail: Any) -> ServiceResult:
        """Failed result for *op*, keeping the error's code and message."""
        error = ServiceError(code=exc.code, message=str(exc), detail=detail)
        return cls(ok=False, op=op, error=error)

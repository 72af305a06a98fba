"""ServiceResult and ServiceError — the envelope every operation returns.

INVARIANT: All GraphService methods return ServiceResult.
The menu and the output layer consume only this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

NOT_FOUND = "NOT_FOUND"


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one graph operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"add_edge"``).
        data: Operation-specific payload on success.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (telemetry when verbose).
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def not_found(cls, op: str, message: str, **detail: Any) -> ServiceResult:
        """Build the ``NOT_FOUND`` failure result for *op*."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=NOT_FOUND, message=message, detail=detail),
        )

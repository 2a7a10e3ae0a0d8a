"""ServiceResult and ServiceError — the envelope every command emits.

Services return entities and raise :class:`~zooctl.domain.errors.ZooError`.
The CLI wraps both outcomes in a ServiceResult so human and JSON output
share one shape.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from zooctl.domain.errors import ZooError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"create_creature"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def failure(cls, op: str, exc: ZooError) -> ServiceResult:
        """Wrap a domain error raised by a service."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=exc.message, detail=exc.detail),
        )

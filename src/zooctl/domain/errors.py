"""Domain error hierarchy.

Services raise these; only the CLI layer turns them into error envelopes.
Each class carries the envelope ``code`` it maps to.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from zooctl.domain.validation import Violation


class ZooError(Exception):
    """Base class for all zooctl domain failures."""

    code = "ZOO_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def detail(self) -> dict[str, Any]:
        return {}


class ResourceNotFoundError(ZooError):
    """The requested id has no corresponding row."""

    code = "NOT_FOUND"

    def __init__(self, resource: str, resource_id: int) -> None:
        super().__init__(f"{resource} not found with id: {resource_id}")
        self.resource = resource
        self.resource_id = resource_id

    @property
    def detail(self) -> dict[str, Any]:
        return {"resource": self.resource, "id": self.resource_id}


class IllegalStateError(ZooError):
    """The operation conflicts with a domain rule."""

    code = "ILLEGAL_STATE"


class ValidationFailedError(ZooError):
    """One or more field constraints were violated."""

    code = "VALIDATION_FAILED"

    def __init__(self, violations: list[Violation]) -> None:
        super().__init__("; ".join(f"{v.field}: {v.message}" for v in violations))
        self.violations = list(violations)

    @property
    def detail(self) -> dict[str, Any]:
        return {"violations": [{"field": v.field, "message": v.message} for v in self.violations]}

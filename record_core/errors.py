"""
Error hierarchy for record-core.

Every error carries a stable `code` so a transport layer can map it without
string matching. `ValidationFailedError`, `RecordNotFoundError`,
`UnknownResourceError` and `UnknownFieldError` describe caller mistakes;
`StoreInvariantError` is a programming error and must propagate.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from record_core.domain.models import Violation


class RecordCoreError(Exception):
    """Base exception for all record-core errors."""

    code: str = "RECORD_CORE_ERROR"

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    def details(self) -> Dict[str, Any]:
        return {}

    def to_dict(self) -> Dict[str, Any]:
        """Standardized error envelope."""
        error: Dict[str, Any] = {"code": self.code, "message": self.message}
        error.update(self.details())
        return {"error": error}


class ValidationFailedError(RecordCoreError):
    """A create payload was rejected; no record was created."""

    code = "VALIDATION_FAILED"

    def __init__(self, resource: str, violations: Iterable[Violation]) -> None:
        self.resource = resource
        self.violations: List[Violation] = list(violations)
        fields = ", ".join(v.field for v in self.violations)
        super().__init__(f"{resource} payload failed validation: {fields}")

    def details(self) -> Dict[str, Any]:
        return {
            "resource": self.resource,
            "violations": [v.model_dump(mode="json") for v in self.violations],
        }


class RecordNotFoundError(RecordCoreError):
    """No record with the requested id exists."""

    code = "RECORD_NOT_FOUND"

    def __init__(self, resource: str, record_id: int) -> None:
        self.resource = resource
        self.record_id = record_id
        super().__init__(f"{resource} record {record_id} not found")

    def details(self) -> Dict[str, Any]:
        return {"resource": self.resource, "record_id": self.record_id}


class UnknownResourceError(RecordCoreError):
    code = "UNKNOWN_RESOURCE"

    def __init__(self, resource: str, available: Iterable[str]) -> None:
        self.resource = resource
        self.available = sorted(available)
        super().__init__(
            f"Unknown resource '{resource}'. Available: {', '.join(self.available)}"
        )

    def details(self) -> Dict[str, Any]:
        return {"resource": self.resource, "available": self.available}


class UnknownFieldError(RecordCoreError):
    """Raised by strict projection when the selector names undeclared fields."""

    code = "UNKNOWN_FIELD"

    def __init__(self, fields: Iterable[str]) -> None:
        self.fields = sorted(fields)
        super().__init__(f"Unknown field(s) requested: {', '.join(self.fields)}")

    def details(self) -> Dict[str, Any]:
        return {"fields": self.fields}


class StoreInvariantError(RecordCoreError):
    """Internal invariant broken (e.g. duplicate id). Indicates a bug, never a user error."""

    code = "STORE_INVARIANT"


__all__ = [
    "RecordCoreError",
    "RecordNotFoundError",
    "StoreInvariantError",
    "UnknownFieldError",
    "UnknownResourceError",
    "ValidationFailedError",
]

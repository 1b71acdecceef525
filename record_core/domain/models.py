"""
Domain models for record-core.

Records, validation violations and the not-found signal are frozen Pydantic
models so they can be compared, serialized and logged uniformly by the store,
the service facade and the CLI.
"""
from __future__ import annotations

import copy
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Literal, Tuple

from pydantic import BaseModel, Field

from record_core.domain.field_spec import CREATED_AT_FIELD, ID_FIELD


class Record(BaseModel):
    """
    A stored entity of one resource type.

    `values` holds the input fields followed by the derived fields, in the
    order the resource's FieldSpec declares them.
    """

    id: int = Field(..., gt=0, description="Server-assigned identifier, unique per resource.")
    resource: str = Field(..., description="Resource type the record belongs to.")
    values: Dict[str, Any] = Field(default_factory=dict, description="Input and derived fields.")
    created_at: datetime = Field(..., description="Creation timestamp, captured once at insert.")

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": False,
    }

    @property
    def field_names(self) -> Tuple[str, ...]:
        return (ID_FIELD, *self.values.keys(), CREATED_AT_FIELD)

    def to_dict(self) -> Dict[str, Any]:
        """Full view in Record field order; a deep copy, so edits never reach the store."""
        view: Dict[str, Any] = {ID_FIELD: self.id}
        view.update(copy.deepcopy(self.values))
        view[CREATED_AT_FIELD] = self.created_at
        return view


class ViolationCode(str, Enum):
    MISSING_FIELD = "MISSING_FIELD"
    INVALID_VALUE = "INVALID_VALUE"


class Violation(BaseModel):
    """One validation failure for one field."""

    code: ViolationCode
    field: str
    reason: str

    model_config = {"frozen": True}


class RecordNotFound(BaseModel):
    """Absence signal returned by `RecordStore.lookup`."""

    record_id: int
    code: Literal["RECORD_NOT_FOUND"] = "RECORD_NOT_FOUND"

    model_config = {"frozen": True}


__all__ = ["Record", "RecordNotFound", "Violation", "ViolationCode"]

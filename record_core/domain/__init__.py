"""
Domain package for record-core.

Exports the field tables and the models shared by the validator, the stores
and the projector. Keep this package focused on data definitions.
"""

from record_core.domain.field_spec import (
    Check,
    DerivedField,
    FieldKind,
    FieldRule,
    FieldSpec,
    matches,
    min_length,
    min_value,
)
from record_core.domain.models import Record, RecordNotFound, Violation, ViolationCode

__all__ = [
    "Check",
    "DerivedField",
    "FieldKind",
    "FieldRule",
    "FieldSpec",
    "Record",
    "RecordNotFound",
    "Violation",
    "ViolationCode",
    "matches",
    "min_length",
    "min_value",
]

"""
Validation package for record-core.

Exposes the generic, FieldSpec-driven validator used on every create.
"""

from record_core.validation.validator import ROOT_FIELD, ValidationResult, validate

__all__ = ["ROOT_FIELD", "ValidationResult", "validate"]

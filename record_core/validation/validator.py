"""
Table-driven payload validation.

`validate` walks a FieldSpec row by row and collects every violation before
returning; it never stops at the first failure and never raises for a
well-formed call. A successful result carries the normalized payload: only
declared fields, in declaration order, sequences as lists.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

from record_core.domain.field_spec import FieldKind, FieldRule, FieldSpec
from record_core.domain.models import Violation, ViolationCode
from record_core.errors import ValidationFailedError

# Pseudo field name used when the payload itself is not an object.
ROOT_FIELD = "$"

_KIND_REASONS = {
    FieldKind.NUMBER: "must be a number",
    FieldKind.INTEGER: "must be an integer",
    FieldKind.STRING: "must be a string",
    FieldKind.NUMBER_LIST: "must be a list of numbers",
    FieldKind.STRING_LIST: "must be a list of strings",
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of one `validate` call: either a payload or a list of violations."""

    resource: str
    payload: Optional[Dict[str, Any]] = None
    violations: Tuple[Violation, ...] = ()
    discarded: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.violations

    def raise_for_violations(self) -> Dict[str, Any]:
        """Return the normalized payload, or raise ValidationFailedError."""
        if self.violations:
            raise ValidationFailedError(self.resource, self.violations)
        return self.payload if self.payload is not None else {}


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _conform_scalar(kind: FieldKind, value: Any) -> Tuple[bool, Any]:
    if kind is FieldKind.NUMBER:
        return _is_number(value), value
    if kind is FieldKind.INTEGER:
        if isinstance(value, int) and not isinstance(value, bool):
            return True, value
        if _is_number(value) and float(value).is_integer():
            return True, int(value)
        return False, value
    if kind is FieldKind.STRING:
        return isinstance(value, str), value
    raise ValueError(f"Not a scalar kind: {kind}")


def _conform(kind: FieldKind, value: Any) -> Tuple[bool, Any]:
    """Check kind conformance and return the normalized value."""
    if not kind.is_sequence:
        return _conform_scalar(kind, value)
    if not isinstance(value, (list, tuple)):
        return False, value
    element_kind = FieldKind.NUMBER if kind is FieldKind.NUMBER_LIST else FieldKind.STRING
    items: List[Any] = []
    for item in value:
        ok, normalized = _conform_scalar(element_kind, item)
        if not ok:
            return False, value
        items.append(normalized)
    return True, items


def _check_field(rule: FieldRule, value: Any) -> Tuple[Optional[Violation], Any]:
    ok, normalized = _conform(rule.kind, value)
    if not ok:
        return Violation(
            code=ViolationCode.INVALID_VALUE, field=rule.name, reason=_KIND_REASONS[rule.kind]
        ), None
    for check in rule.checks:
        if not check.passes(normalized):
            return Violation(
                code=ViolationCode.INVALID_VALUE, field=rule.name, reason=check.message
            ), None
    return None, normalized


def validate(raw_payload: Any, spec: FieldSpec) -> ValidationResult:
    """
    Validate a raw creation payload against a FieldSpec.

    Parameters
    ----------
    raw_payload : Any
        Decoded request body; expected to be a mapping.
    spec : FieldSpec
        Field table of the target resource type.

    Returns
    -------
    ValidationResult
        `payload` set when no violations were found, otherwise every
        violation in FieldSpec order (at most one per field).
    """
    if not isinstance(raw_payload, Mapping):
        return ValidationResult(
            resource=spec.resource,
            violations=(
                Violation(
                    code=ViolationCode.INVALID_VALUE,
                    field=ROOT_FIELD,
                    reason="payload must be an object",
                ),
            ),
        )

    violations: List[Violation] = []
    payload: Dict[str, Any] = {}
    for rule in spec.rules:
        value = raw_payload.get(rule.name)
        if value is None:
            if rule.required:
                violations.append(
                    Violation(
                        code=ViolationCode.MISSING_FIELD,
                        field=rule.name,
                        reason="field is required",
                    )
                )
            continue
        violation, normalized = _check_field(rule, value)
        if violation is not None:
            violations.append(violation)
        else:
            payload[rule.name] = normalized

    declared = set(spec.input_fields)
    discarded = tuple(str(key) for key in raw_payload if key not in declared)

    if violations:
        return ValidationResult(
            resource=spec.resource, violations=tuple(violations), discarded=discarded
        )
    return ValidationResult(resource=spec.resource, payload=payload, discarded=discarded)


__all__ = ["ROOT_FIELD", "ValidationResult", "validate"]

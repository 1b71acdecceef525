"""
Replay a JSON-lines script of create/read operations against one service.

Each non-blank line is an object:
    {"op": "create", "resource": "orders", "payload": {...}}
    {"op": "read", "resource": "users", "id": 1, "fields": "name,email"}

Every operation produces one outcome dict; failures are captured as the
error envelope of the raised RecordCoreError so later lines still run.
Store invariant failures are not captured.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Dict, Iterable, List

from record_core.errors import RecordCoreError, StoreInvariantError
from record_core.service import RecordService
from record_core.utils.logging import get_logger

log = get_logger(__name__)


class InvalidOperationError(RecordCoreError):
    """A script line could not be interpreted as an operation."""

    code = "INVALID_OPERATION"


def _jsonable(view: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: value.isoformat() if isinstance(value, datetime) else value
        for key, value in view.items()
    }


def _parse_line(line: str) -> Dict[str, Any]:
    try:
        operation = json.loads(line)
    except json.JSONDecodeError as exc:
        raise InvalidOperationError(f"Line is not valid JSON: {exc.msg}") from exc
    if not isinstance(operation, dict):
        raise InvalidOperationError("Operation must be a JSON object")
    if operation.get("op") not in ("create", "read"):
        raise InvalidOperationError(f"Unknown op {operation.get('op')!r}; expected create or read")
    if not isinstance(operation.get("resource"), str):
        raise InvalidOperationError("Operation requires a 'resource' name")
    return operation


def _execute(service: RecordService, operation: Dict[str, Any]) -> Dict[str, Any]:
    resource = operation["resource"]
    if operation["op"] == "create":
        record = service.create(resource, operation.get("payload"))
        return {"record_id": record.id, "record": _jsonable(record.to_dict())}

    record_id = operation.get("id")
    if isinstance(record_id, bool) or not isinstance(record_id, int):
        raise InvalidOperationError("read requires an integer 'id'")
    fields = operation.get("fields")
    if fields is not None and not isinstance(fields, (str, list)):
        raise InvalidOperationError("'fields' must be a comma-separated string or a list")
    return {"record_id": record_id, "record": _jsonable(service.read(resource, record_id, fields))}


def run_script(service: RecordService, lines: Iterable[str]) -> List[Dict[str, Any]]:
    """
    Execute every operation in `lines` and return one outcome per operation.
    """
    outcomes: List[Dict[str, Any]] = []
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        outcome: Dict[str, Any] = {"line": line_no}
        try:
            operation = _parse_line(line)
            outcome.update(op=operation["op"], resource=operation["resource"])
            outcome.update(_execute(service, operation))
            outcome["ok"] = True
        except StoreInvariantError:
            raise
        except RecordCoreError as exc:
            log.info(
                f"[LINE {line_no}] {exc.code}",
                extra={"line": line_no, "code": exc.code},
            )
            outcome["ok"] = False
            outcome.update(exc.to_dict())
        outcomes.append(outcome)
    return outcomes


__all__ = ["InvalidOperationError", "run_script"]

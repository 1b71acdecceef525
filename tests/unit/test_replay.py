from __future__ import annotations

import json

from rich.console import Console

from record_core.replay import run_script
from record_core.reporter import print_field_specs, print_outcomes
from record_core.service import RecordService


def _lines(*operations) -> list[str]:
    return [json.dumps(op) if not isinstance(op, str) else op for op in operations]


def test_create_then_read(service: RecordService):
    outcomes = run_script(
        service,
        _lines(
            {
                "op": "create",
                "resource": "orders",
                "payload": {"products": [1, 2, 3], "quantity": 2, "shipping_address": "X"},
            },
            {"op": "read", "resource": "orders", "id": 1, "fields": "total_amount,products"},
        ),
    )

    assert [o["ok"] for o in outcomes] == [True, True]
    assert outcomes[0]["record"]["created_at"] == "2024-04-01T09:30:00+00:00"
    assert outcomes[0]["record_id"] == 1
    assert outcomes[1]["record"] == {"products": [1, 2, 3], "total_amount": 2000}


def test_failures_are_reported_and_later_lines_still_run(service: RecordService):
    outcomes = run_script(
        service,
        _lines(
            {"op": "create", "resource": "orders", "payload": {"products": []}},
            "not json",
            {"op": "delete", "resource": "orders"},
            {"op": "read", "resource": "orders", "id": "1"},
            {"op": "read", "resource": "orders", "id": 999},
            "",
            {"op": "create", "resource": "nope", "payload": {}},
        ),
    )

    codes = [o["error"]["code"] for o in outcomes]
    assert codes == [
        "VALIDATION_FAILED",
        "INVALID_OPERATION",
        "INVALID_OPERATION",
        "INVALID_OPERATION",
        "RECORD_NOT_FOUND",
        "UNKNOWN_RESOURCE",
    ]
    assert [o["line"] for o in outcomes] == [1, 2, 3, 4, 5, 7]
    assert outcomes[4]["error"]["record_id"] == 999


def test_reporter_renders_tables(service: RecordService):
    console = Console(record=True, width=140)
    outcomes = run_script(
        service,
        _lines(
            {"op": "create", "resource": "users", "payload": {"name": "A", "email": "a@x.com", "age": 3}},
            {"op": "read", "resource": "users", "id": 5},
        ),
    )

    print_field_specs([service.spec("orders")], console=console)
    print_outcomes(outcomes, console=console)
    text = console.export_text()

    assert "total_amount" in text
    assert "computed at creation" in text
    assert "RECORD_NOT_FOUND" in text
    assert "1 succeeded, 1 failed" in text


def test_reporter_handles_no_outcomes():
    console = Console(record=True)
    print_outcomes([], console=console)

    assert "No operations" in console.export_text()


def test_oversize_quantity_line_does_not_abort_replay(service: RecordService):
    outcomes = run_script(
        service,
        [
            '{"op": "create", "resource": "orders", "payload": '
            '{"products": [1], "quantity": 1' + "0" * 400 + ', "shipping_address": "X"}}',
            json.dumps({"op": "read", "resource": "orders", "id": 1, "fields": "quantity"}),
        ],
    )

    assert [o["ok"] for o in outcomes] == [True, True]
    assert outcomes[1]["record"]["quantity"] == 10**400

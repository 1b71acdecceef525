from __future__ import annotations

import pytest

from record_core.config import Settings
from record_core.domain.models import ViolationCode
from record_core.errors import (
    RecordNotFoundError,
    UnknownFieldError,
    UnknownResourceError,
    ValidationFailedError,
)
from record_core import config
from record_core.service import RecordService, build_service, get_service

ORDER = {"products": [1, 2, 3], "quantity": 2, "shipping_address": "X"}


def test_resources_are_registered(service: RecordService):
    assert service.resources() == ["orders", "users"]


def test_create_order_computes_total_amount(service: RecordService, frozen_now):
    record = service.create("orders", ORDER)

    assert record.to_dict() == {
        "id": 1,
        "products": [1, 2, 3],
        "quantity": 2,
        "shipping_address": "X",
        "total_amount": 2000,
        "created_at": frozen_now,
    }


def test_unit_price_comes_from_settings(test_settings: Settings):
    settings = test_settings.model_copy(update={"order_unit_price": 250})
    service = build_service(settings)

    assert service.create("orders", ORDER).values["total_amount"] == 500


def test_rejected_payload_never_reaches_the_store(service: RecordService, monkeypatch):
    store = service.store("orders")
    calls = []
    monkeypatch.setattr(store, "insert", lambda payload: calls.append(payload))

    with pytest.raises(ValidationFailedError) as excinfo:
        service.create("orders", {"products": [1], "shipping_address": "X"})

    assert calls == []
    assert [(v.code, v.field) for v in excinfo.value.violations] == [
        (ViolationCode.MISSING_FIELD, "quantity")
    ]


def test_failed_create_does_not_consume_an_id(service: RecordService):
    with pytest.raises(ValidationFailedError):
        service.create("orders", dict(ORDER, quantity=0))

    assert service.create("orders", ORDER).id == 1
    assert len(service.store("orders")) == 1


def test_validation_error_envelope(service: RecordService):
    with pytest.raises(ValidationFailedError) as excinfo:
        service.create("orders", dict(ORDER, products=[]))

    assert excinfo.value.to_dict() == {
        "error": {
            "code": "VALIDATION_FAILED",
            "message": "orders payload failed validation: products",
            "resource": "orders",
            "violations": [
                {
                    "code": "INVALID_VALUE",
                    "field": "products",
                    "reason": "at least one product must be selected",
                }
            ],
        }
    }


def test_read_round_trips_created_record(service: RecordService):
    record = service.create("orders", ORDER)

    assert service.read("orders", record.id) == record.to_dict()


def test_read_with_selector_string(service: RecordService):
    service.create("users", {"name": "A", "email": "a@x.com", "age": 30, "preferences": ["p", "q"]})

    assert service.read("users", 1, "email,name,bogus") == {"name": "A", "email": "a@x.com"}
    assert service.read("users", 1, ["age"]) == {"age": 30}


def test_read_missing_record(service: RecordService):
    service.create("orders", ORDER)

    with pytest.raises(RecordNotFoundError) as excinfo:
        service.read("orders", 999)

    assert excinfo.value.record_id == 999
    assert excinfo.value.resource == "orders"


def test_unknown_resource(service: RecordService):
    with pytest.raises(UnknownResourceError) as excinfo:
        service.create("invoices", {})

    assert excinfo.value.available == ["orders", "users"]


def test_strict_projection_from_settings(test_settings: Settings):
    service = build_service(test_settings.model_copy(update={"projection_strict": True}))
    service.create("orders", ORDER)

    with pytest.raises(UnknownFieldError):
        service.read("orders", 1, "quantity,unknown")


def test_seeded_users(test_settings: Settings):
    service = build_service(test_settings.model_copy(update={"seed_users": True}))

    assert service.read("users", 1, "name,email") == {
        "name": "Taro Tanaka",
        "email": "tanaka@example.com",
    }
    assert len(service.store("orders")) == 0


def test_stores_are_independent_per_resource(service: RecordService):
    service.create("orders", ORDER)
    user = service.create("users", {"name": "A", "email": "a@x.com", "age": 1})

    assert user.id == 1


def test_get_service_is_created_once(monkeypatch):
    monkeypatch.setenv("SEED_USERS", "false")
    config.get_settings.cache_clear()
    get_service.cache_clear()
    try:
        first = get_service()
        first.create("orders", ORDER)

        assert get_service() is first
        assert len(get_service().store("orders")) == 1
    finally:
        get_service.cache_clear()
        config.get_settings.cache_clear()

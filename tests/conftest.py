"""
Pytest configuration for record-core.

Provides fixtures for:
- Settings with test-specific overrides
- A frozen clock so creation timestamps are predictable
- Field tables and fresh stores/services per test
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from record_core.config import Settings
from record_core.domain.field_spec import (
    DerivedField,
    FieldKind,
    FieldRule,
    FieldSpec,
    min_length,
    min_value,
)
from record_core.resources import user_profile_spec
from record_core.service import RecordService, build_service
from record_core.storage.record_store import RecordStore

FROZEN_NOW = datetime(2024, 4, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def frozen_clock():
    return lambda: FROZEN_NOW


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return Settings(
        app_env="test",
        log_level="DEBUG",
        order_unit_price=1000,
        seed_users=False,
        projection_strict=False,
    )


@pytest.fixture
def order_spec() -> FieldSpec:
    """Order table with the `total = quantity x 1000` derivation."""
    return FieldSpec(
        resource="orders",
        rules=(
            FieldRule("products", FieldKind.NUMBER_LIST, checks=(min_length(1),)),
            FieldRule("quantity", FieldKind.NUMBER, checks=(min_value(1),)),
            FieldRule("shipping_address", FieldKind.STRING),
        ),
        derived=(DerivedField("total", lambda payload: payload["quantity"] * 1000),),
    )


@pytest.fixture
def user_spec() -> FieldSpec:
    return user_profile_spec()


@pytest.fixture
def order_store(order_spec: FieldSpec, frozen_clock) -> RecordStore:
    return RecordStore(order_spec, clock=frozen_clock)


@pytest.fixture
def user_store(user_spec: FieldSpec, frozen_clock) -> RecordStore:
    return RecordStore(user_spec, clock=frozen_clock)


@pytest.fixture
def service(test_settings: Settings, frozen_clock) -> RecordService:
    return build_service(test_settings, clock=frozen_clock)


@pytest.fixture
def frozen_now() -> datetime:
    return FROZEN_NOW

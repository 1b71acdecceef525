"""
Resource catalog: the FieldSpec tables served by record-core.

- orders: products, quantity and shipping address; total_amount derived from
  quantity and the configured unit price.
- users: profile with name, email, age and optional preferences.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List

from record_core.config import Settings
from record_core.domain.field_spec import (
    DerivedField,
    FieldKind,
    FieldRule,
    FieldSpec,
    matches,
    min_length,
    min_value,
)

ORDERS = "orders"
USERS = "users"

_EMAIL_PATTERN = r"[^@\s]+@[^@\s]+\.[^@\s]+"

SAMPLE_USERS: List[Dict[str, Any]] = [
    {
        "name": "Taro Tanaka",
        "email": "tanaka@example.com",
        "age": 30,
        "preferences": ["reading", "movies"],
    },
]


def order_spec(unit_price: int) -> FieldSpec:
    return FieldSpec(
        resource=ORDERS,
        description="Customer order; total_amount is quantity times the unit price.",
        rules=(
            FieldRule(
                "products",
                FieldKind.NUMBER_LIST,
                checks=(min_length(1, "at least one product must be selected"),),
            ),
            FieldRule(
                "quantity",
                FieldKind.NUMBER,
                checks=(min_value(1, "quantity must be 1 or greater"),),
            ),
            FieldRule("shipping_address", FieldKind.STRING),
        ),
        derived=(
            DerivedField("total_amount", lambda payload: payload["quantity"] * unit_price),
        ),
    )


def user_profile_spec() -> FieldSpec:
    return FieldSpec(
        resource=USERS,
        description="User profile.",
        rules=(
            FieldRule("name", FieldKind.STRING, checks=(min_length(1, "name must not be empty"),)),
            FieldRule(
                "email",
                FieldKind.STRING,
                checks=(matches(_EMAIL_PATTERN, "email must be a valid address"),),
            ),
            FieldRule("age", FieldKind.INTEGER, checks=(min_value(0, "age must not be negative"),)),
            FieldRule("preferences", FieldKind.STRING_LIST, required=False),
        ),
    )


def _spec_factories(settings: Settings) -> Dict[str, Callable[[], FieldSpec]]:
    """Registry of available resource types."""
    return {
        ORDERS: lambda: order_spec(settings.order_unit_price),
        USERS: lambda: user_profile_spec(),
    }


def build_catalog(settings: Settings) -> Dict[str, FieldSpec]:
    return {name: factory() for name, factory in sorted(_spec_factories(settings).items())}


__all__ = [
    "ORDERS",
    "SAMPLE_USERS",
    "USERS",
    "build_catalog",
    "order_spec",
    "user_profile_spec",
]

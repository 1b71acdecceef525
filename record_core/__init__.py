"""
record-core - validated record ingestion and field projection.

This package provides the in-memory core behind two request patterns:

- Create: validate a raw payload against a declarative field table, then
  admit it with a monotonically assigned id and server-computed fields
- Read: look a record up by id and narrow it to the client's requested fields

Transport (HTTP routing, status codes, wire encoding) lives outside this
package; the stores are volatile and vanish with the process.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from record_core.config import Settings, get_settings
from record_core.domain import FieldKind, FieldRule, FieldSpec, Record, RecordNotFound, Violation
from record_core.errors import (
    RecordCoreError,
    RecordNotFoundError,
    StoreInvariantError,
    UnknownFieldError,
    UnknownResourceError,
    ValidationFailedError,
)
from record_core.projection import narrow, parse_field_selector
from record_core.service import RecordService, build_service, get_service
from record_core.storage import RecordStore
from record_core.utils.logging import configure_logging, get_logger
from record_core.validation import ValidationResult, validate

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "FieldKind",
    "FieldRule",
    "FieldSpec",
    "Record",
    "RecordNotFound",
    "Violation",
    # Core operations
    "ValidationResult",
    "validate",
    "RecordStore",
    "narrow",
    "parse_field_selector",
    # Service
    "RecordService",
    "build_service",
    "get_service",
    # Errors
    "RecordCoreError",
    "RecordNotFoundError",
    "StoreInvariantError",
    "UnknownFieldError",
    "UnknownResourceError",
    "ValidationFailedError",
    # Logging
    "configure_logging",
    "get_logger",
]

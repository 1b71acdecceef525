"""
Service facade binding each resource type to its FieldSpec and RecordStore.

Usage (example from a request handler):
    from record_core.service import get_service

    service = get_service()
    order = service.create("orders", {"products": [1], "quantity": 2, "shipping_address": "X"})
    profile = service.read("users", 1, fields="name,email")

The service is built once per process (`build_service`) and cached by
`get_service`; the stores it owns are discarded when the process exits.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, Iterable, List, Optional, Union

from record_core.config import Settings, get_settings
from record_core.domain.field_spec import FieldSpec
from record_core.domain.models import Record
from record_core.errors import UnknownResourceError
from record_core.projection.projector import PartialRecord, narrow, parse_field_selector
from record_core.resources import SAMPLE_USERS, USERS, build_catalog
from record_core.storage.record_store import Clock, RecordStore
from record_core.utils.logging import get_logger
from record_core.validation.validator import validate

log = get_logger(__name__)

FieldSelector = Union[str, Iterable[str], None]


class RecordService:
    """
    Create and read records across every registered resource type.

    Parameters
    ----------
    specs : dict[str, FieldSpec]
        Resource name to field table.
    strict_projection : bool
        Reject unknown field names on read instead of dropping them.
    clock : Callable[[], datetime], optional
        Timestamp source handed to every store.
    """

    def __init__(
        self,
        specs: Dict[str, FieldSpec],
        strict_projection: bool = False,
        clock: Optional[Clock] = None,
    ) -> None:
        self.strict_projection = strict_projection
        self._stores: Dict[str, RecordStore] = {
            name: RecordStore(spec, clock=clock) for name, spec in specs.items()
        }

    def resources(self) -> List[str]:
        """List registered resource names."""
        return sorted(self._stores)

    def store(self, resource: str) -> RecordStore:
        try:
            return self._stores[resource]
        except KeyError:
            raise UnknownResourceError(resource, self._stores) from None

    def spec(self, resource: str) -> FieldSpec:
        return self.store(resource).spec

    def create(self, resource: str, raw_payload: Any) -> Record:
        """
        Validate `raw_payload` and insert it.

        Raises
        ------
        ValidationFailedError
            With every violation found; nothing is inserted.
        """
        store = self.store(resource)
        result = validate(raw_payload, store.spec)
        if result.discarded:
            log.debug(
                "Discarded undeclared payload fields",
                extra={"resource": resource, "fields": list(result.discarded)},
            )
        if not result.ok:
            log.warning(
                "Payload rejected",
                extra={
                    "resource": resource,
                    "violations": [v.model_dump(mode="json") for v in result.violations],
                },
            )
        payload = result.raise_for_violations()
        return store.insert(payload)

    def read(self, resource: str, record_id: int, fields: FieldSelector = None) -> PartialRecord:
        """
        Fetch a record and project it to the requested fields.

        `fields` is either a raw comma-separated selector or an iterable of
        names; None or empty returns the full record.

        Raises
        ------
        RecordNotFoundError
            When no record with `record_id` exists.
        UnknownFieldError
            Only in strict mode, for names the record does not carry.
        """
        store = self.store(resource)
        requested = parse_field_selector(fields) if isinstance(fields, str) else frozenset(fields or ())
        record = store.get(record_id)
        return narrow(record, requested, strict=self.strict_projection)

    def seed(self, resource: str, payloads: Iterable[Dict[str, Any]]) -> List[Record]:
        """Insert bootstrap data through the regular validate-then-insert path."""
        return [self.create(resource, payload) for payload in payloads]


def build_service(settings: Optional[Settings] = None, clock: Optional[Clock] = None) -> RecordService:
    """
    Build a fresh service with empty stores (seeded per settings).
    """
    settings = settings or get_settings()
    service = RecordService(
        build_catalog(settings),
        strict_projection=settings.projection_strict,
        clock=clock,
    )
    if settings.seed_users:
        seeded = service.seed(USERS, SAMPLE_USERS)
        log.info("Seeded sample users", extra={"resource": USERS, "count": len(seeded)})
    return service


@lru_cache(maxsize=1)
def get_service() -> RecordService:
    """
    Process-wide service instance, created on first use.
    """
    return build_service(get_settings())


__all__ = ["FieldSelector", "RecordService", "build_service", "get_service"]

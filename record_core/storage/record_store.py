"""
In-memory record store, one instance per resource type.

Intent:
- Assign strictly increasing ids, compute derived fields and stamp the
  creation time exactly once per record.
- Serialize inserts with a lock so concurrent callers (threads or interleaved
  asyncio tasks) never share an id, and publish a record only once it is
  fully built.
- Keep state volatile: nothing is flushed, the store disappears with the
  process.
"""

from __future__ import annotations

import copy
import threading
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from record_core.domain.field_spec import FieldSpec
from record_core.domain.models import Record, RecordNotFound
from record_core.errors import RecordNotFoundError, StoreInvariantError
from record_core.utils.logging import get_logger

log = get_logger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RecordStore:
    """
    Holds every Record of one resource type.

    The stored Records never leave the store; `insert`, `lookup` and `get`
    hand out deep copies.

    Parameters
    ----------
    spec : FieldSpec
        Field table of the resource; supplies field order and derivation rules.
    clock : Callable[[], datetime], optional
        Source of creation timestamps. Defaults to the current UTC time.
    """

    def __init__(self, spec: FieldSpec, clock: Optional[Clock] = None) -> None:
        self.spec = spec
        self._clock = clock or _utc_now
        self._records: List[Record] = []
        self._index: Dict[int, Record] = {}
        self._next_id = 0
        self._lock = threading.Lock()

    @property
    def resource(self) -> str:
        return self.spec.resource

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"RecordStore(resource={self.resource!r}, records={len(self)})"

    def _build(self, record_id: int, payload: Mapping[str, Any]) -> Record:
        values: Dict[str, Any] = {
            name: copy.deepcopy(payload[name]) for name in self.spec.input_fields if name in payload
        }
        values.update(self.spec.derive(values))
        return Record(
            id=record_id,
            resource=self.resource,
            values=values,
            created_at=self._clock(),
        )

    def insert(self, payload: Mapping[str, Any]) -> Record:
        """
        Admit an already-validated payload and return a copy of the stored Record.
        """
        with self._lock:
            self._next_id += 1
            record_id = self._next_id
            if record_id in self._index:
                log.critical(
                    "Duplicate record id assigned",
                    extra={"resource": self.resource, "record_id": record_id},
                )
                raise StoreInvariantError(
                    f"{self.resource} id {record_id} assigned twice"
                )
            record = self._build(record_id, payload)
            self._records.append(record)
            self._index[record_id] = record

        log.info(
            "Record created",
            extra={"resource": self.resource, "record_id": record.id},
        )
        return record.model_copy(deep=True)

    def lookup(self, record_id: int) -> Union[Record, RecordNotFound]:
        """
        Return a copy of the Record with `record_id`, or a RecordNotFound value.
        """
        record = self._index.get(record_id)
        if record is None:
            return RecordNotFound(record_id=record_id)
        return record.model_copy(deep=True)

    def get(self, record_id: int) -> Record:
        """Like `lookup`, but raises RecordNotFoundError on absence."""
        found = self.lookup(record_id)
        if isinstance(found, RecordNotFound):
            raise RecordNotFoundError(self.resource, found.record_id)
        return found


__all__ = ["Clock", "RecordStore"]

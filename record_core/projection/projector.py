"""
Field projection: narrow a full Record to the fields a client asked for.

Output order always follows the Record's own field order, so the result is
the same whatever order (or repetition) the client used. Unknown names are
dropped unless strict mode is requested.
"""

from __future__ import annotations

from typing import Any, Dict, FrozenSet, Iterable, Optional

from record_core.domain.models import Record
from record_core.errors import UnknownFieldError

PartialRecord = Dict[str, Any]


def parse_field_selector(raw: Optional[str]) -> FrozenSet[str]:
    """
    Parse a comma-separated selector (e.g. "name, email") into a set of names.

    Blank entries are ignored; None or an empty string means "all fields".
    """
    if not raw:
        return frozenset()
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


def narrow(record: Record, requested_fields: Iterable[str], strict: bool = False) -> PartialRecord:
    """
    Return the subset of `record` named by `requested_fields`.

    Parameters
    ----------
    record : Record
        Source record; never modified.
    requested_fields : Iterable[str]
        Requested names. Empty means the full record.
    strict : bool
        Raise UnknownFieldError for names the record does not carry instead
        of silently dropping them.
    """
    requested = frozenset(requested_fields)
    full = record.to_dict()
    if not requested:
        return full

    if strict:
        unknown = requested.difference(record.field_names)
        if unknown:
            raise UnknownFieldError(unknown)

    return {name: full[name] for name in record.field_names if name in requested}


__all__ = ["PartialRecord", "narrow", "parse_field_selector"]

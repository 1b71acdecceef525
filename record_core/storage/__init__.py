"""
Storage package for record-core.

Volatile, per-resource record stores. No persistence backend exists; the
stores live exactly as long as the process.
"""

from record_core.storage.record_store import Clock, RecordStore

__all__ = ["Clock", "RecordStore"]

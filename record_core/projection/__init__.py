"""
Projection package for record-core.
"""

from record_core.projection.projector import PartialRecord, narrow, parse_field_selector

__all__ = ["PartialRecord", "narrow", "parse_field_selector"]

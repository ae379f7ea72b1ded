"""
Data models for the address store.

Field names follow the store's own naming convention, not the
domain's. No derived fields live here.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DataAddress:
    """An address row exactly as the store delivers it."""

    raw_id: str
    raw_street_name: str
    raw_street_number: str
    raw_city: str

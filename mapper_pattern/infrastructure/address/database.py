"""
Adapter: Address store.

Defines the contract of the external store the data source reads from,
plus the in-memory store the application ships with.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from mapper_pattern.infrastructure.address.models import DataAddress

logger = logging.getLogger(__name__)

MOCK_ADDRESS = DataAddress(
    raw_id="1",
    raw_street_name="FancyStreet",
    raw_street_number="1",
    raw_city="CoolCity",
)


class AppDatabase(ABC):
    """Contract of the store holding the address record."""

    @abstractmethod
    def get_address(self) -> Optional[DataAddress]:
        """Return the stored record, or None if the store is empty."""
        raise NotImplementedError


class InMemoryAppDatabase(AppDatabase):
    """Store backed by a single record held in memory.

    Defaults to the mock record so the application runs without
    any external setup.
    """

    def __init__(self, record: Optional[DataAddress] = MOCK_ADDRESS) -> None:
        self._record = record

    def get_address(self) -> Optional[DataAddress]:
        logger.debug("Reading address from in-memory store")
        return self._record

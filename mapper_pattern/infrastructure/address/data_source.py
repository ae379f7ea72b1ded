"""
Adapter: Address data source.

Reads the raw address record from the store. Reports an empty store
as AddressNotFoundError so callers never receive a missing record.
"""

import logging
from abc import ABC, abstractmethod

from mapper_pattern.domain.address.errors import AddressNotFoundError
from mapper_pattern.infrastructure.address.database import AppDatabase
from mapper_pattern.infrastructure.address.models import DataAddress

logger = logging.getLogger(__name__)


class AddressDataSource(ABC):
    """Contract for fetching the raw address record."""

    @abstractmethod
    def get_address(self) -> DataAddress:
        """Return the raw address record.

        Raises:
            AddressNotFoundError: If the store holds no record.
        """
        raise NotImplementedError


class AddressDataSourceAdapter(AddressDataSource):
    """Data source reading from an AppDatabase."""

    def __init__(self, app_database: AppDatabase) -> None:
        self._app_database = app_database

    def get_address(self) -> DataAddress:
        record = self._app_database.get_address()
        if record is None:
            logger.warning("Address store returned no record")
            raise AddressNotFoundError()
        logger.debug("Fetched raw address id=%s", record.raw_id)
        return record

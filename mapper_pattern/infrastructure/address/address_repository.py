"""
Adapter: Address repository.

Implements AddressRepository port.
Responsible for turning the data source's raw record into a domain entity.
"""

import logging

from mapper_pattern.domain.address.entities import DomainAddress
from mapper_pattern.domain.address.ports import AddressRepository
from mapper_pattern.infrastructure.address.data_source import AddressDataSource
from mapper_pattern.infrastructure.address.models import DataAddress
from mapper_pattern.shared.mapping import Mapper

logger = logging.getLogger(__name__)


class AddressRepositoryAdapter(AddressRepository):
    """Concrete adapter for retrieving the domain address.

    Holds no state of its own: every call reads through the data
    source and maps the result.
    """

    def __init__(
        self,
        data_source: AddressDataSource,
        mapper: Mapper[DataAddress, DomainAddress],
    ) -> None:
        self._data_source = data_source
        self._mapper = mapper

    def get_address(self) -> DomainAddress:
        """Return the stored address in its domain shape.

        Raises:
            AddressNotFoundError: Propagated from the data source.
        """
        address = self._mapper.map(self._data_source.get_address())
        logger.debug("Mapped address id=%s to domain", address.id)
        return address

"""
Use case: Retrieve the stored address.

Input: None
Output: DomainAddress
Side effects: None.
Failure cases: AddressNotFoundError.
"""

import logging
from abc import ABC, abstractmethod

from mapper_pattern.domain.address.entities import DomainAddress
from mapper_pattern.domain.address.ports import AddressRepository

logger = logging.getLogger(__name__)


class GetAddressUseCase(ABC):
    """Contract of the "get address" action, invoked with no arguments."""

    @abstractmethod
    def __call__(self) -> DomainAddress:
        raise NotImplementedError


class GetAddress(GetAddressUseCase):
    """Retrieves the address through the AddressRepository port.

    Keeps callers decoupled from the repository's shape: they only
    know there is one action that yields an address.
    """

    def __init__(self, address_repository: AddressRepository) -> None:
        self._address_repository = address_repository

    def __call__(self) -> DomainAddress:
        """Run the use case.

        Returns:
            The stored address.

        Raises:
            AddressNotFoundError: If no address is stored.
        """
        logger.info("Retrieving address")
        return self._address_repository.get_address()

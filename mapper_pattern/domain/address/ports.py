"""
Port interfaces (ABCs) for the address bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod

from mapper_pattern.domain.address.entities import DomainAddress


class AddressRepository(ABC):
    """Port for retrieving the address in its domain shape."""

    @abstractmethod
    def get_address(self) -> DomainAddress:
        """Return the stored address.

        Raises:
            AddressNotFoundError: If the backing store holds no address.
        """
        raise NotImplementedError

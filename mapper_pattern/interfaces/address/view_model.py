"""
View-model for the address view.

Exposes the address in its presentation shape. Nothing is cached:
every read runs the use case again.
"""

from mapper_pattern.application.address.get_address import GetAddressUseCase
from mapper_pattern.domain.address.entities import DomainAddress
from mapper_pattern.interfaces.address.schemas import Address
from mapper_pattern.shared.mapping import Mapper


class AddressViewModel:
    """Combines the get-address use case with the presentation mapper."""

    def __init__(
        self,
        get_address_use_case: GetAddressUseCase,
        mapper: Mapper[DomainAddress, Address],
    ) -> None:
        self._get_address_use_case = get_address_use_case
        self._mapper = mapper

    @property
    def address(self) -> Address:
        """Return the freshly fetched, render-ready address."""
        return self._mapper.map(self._get_address_use_case())

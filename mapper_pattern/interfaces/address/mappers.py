"""
Mappers from domain entities to presentation models.
"""

from mapper_pattern.domain.address.entities import DomainAddress
from mapper_pattern.interfaces.address.schemas import Address
from mapper_pattern.shared.mapping import Mapper


class DomainAddressToAddressMapper(Mapper[DomainAddress, Address]):
    """Keep only the derived full address."""

    def map(self, input: DomainAddress) -> Address:  # noqa: A002
        return Address(full_address=input.full_address)

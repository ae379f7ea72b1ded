"""
Mappers from store records to domain entities.
"""

from mapper_pattern.domain.address.entities import DomainAddress
from mapper_pattern.infrastructure.address.models import DataAddress
from mapper_pattern.shared.mapping import Mapper


class DataAddressToDomainAddressMapper(Mapper[DataAddress, DomainAddress]):
    """Rename the store's fields into the domain's vocabulary."""

    def map(self, input: DataAddress) -> DomainAddress:  # noqa: A002
        return DomainAddress(
            id=input.raw_id,
            street_name=input.raw_street_name,
            street_number=input.raw_street_number,
            city=input.raw_city,
        )

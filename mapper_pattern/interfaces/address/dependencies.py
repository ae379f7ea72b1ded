"""
Dependency injection for the address bounded context.

Factory functions wire infrastructure adapters into use cases and
view-models via constructor injection. These are the composition
root for the address context.
"""

from typing import TextIO

from mapper_pattern.application.address.get_address import (
    GetAddress,
    GetAddressUseCase,
)
from mapper_pattern.domain.address.ports import AddressRepository
from mapper_pattern.infrastructure.address.address_repository import (
    AddressRepositoryAdapter,
)
from mapper_pattern.infrastructure.address.data_source import (
    AddressDataSourceAdapter,
)
from mapper_pattern.infrastructure.address.database import (
    AppDatabase,
    InMemoryAppDatabase,
)
from mapper_pattern.infrastructure.address.mappers import (
    DataAddressToDomainAddressMapper,
)
from mapper_pattern.interfaces.address.mappers import DomainAddressToAddressMapper
from mapper_pattern.interfaces.address.view import AddressView
from mapper_pattern.interfaces.address.view_model import AddressViewModel


def get_address_repository(
    app_database: AppDatabase | None = None,
) -> AddressRepository:
    """Build the AddressRepository adapter over the given store."""
    return AddressRepositoryAdapter(
        data_source=AddressDataSourceAdapter(app_database or InMemoryAppDatabase()),
        mapper=DataAddressToDomainAddressMapper(),
    )


def get_address_use_case(
    app_database: AppDatabase | None = None,
) -> GetAddressUseCase:
    """Build GetAddress with its infrastructure dependencies."""
    return GetAddress(address_repository=get_address_repository(app_database))


def get_address_view_model(
    app_database: AppDatabase | None = None,
) -> AddressViewModel:
    """Build AddressViewModel with its use case and presentation mapper."""
    return AddressViewModel(
        get_address_use_case=get_address_use_case(app_database),
        mapper=DomainAddressToAddressMapper(),
    )


def get_address_view(
    app_database: AppDatabase | None = None,
    stream: TextIO | None = None,
) -> AddressView:
    """Build the AddressView on top of a fully wired view-model."""
    return AddressView(get_address_view_model(app_database), stream=stream)

"""
Tests for the generic mapper contract and both address mappers.
"""

import pytest

from mapper_pattern.domain.address.entities import DomainAddress
from mapper_pattern.infrastructure.address.mappers import (
    DataAddressToDomainAddressMapper,
)
from mapper_pattern.infrastructure.address.models import DataAddress
from mapper_pattern.interfaces.address.mappers import DomainAddressToAddressMapper
from mapper_pattern.interfaces.address.schemas import Address
from mapper_pattern.shared.mapping import ListMapper, Mapper


class _UpperMapper(Mapper[str, str]):
    def __init__(self) -> None:
        self.calls: list[str] = []

    def map(self, input: str) -> str:  # noqa: A002
        self.calls.append(input)
        return input.upper()


class TestMapperContract:
    """Tests for the Mapper ABC."""

    def test_mapper_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Mapper()  # type: ignore[abstract]


class TestListMapper:
    """Tests for the list-lifted mapper."""

    def test_preserves_order_and_length(self) -> None:
        """Output has the same length and order as the input."""
        mapper = ListMapper(_UpperMapper())

        assert mapper.map(["b", "a", "c", "a"]) == ["B", "A", "C", "A"]

    def test_empty_sequence(self) -> None:
        assert ListMapper(_UpperMapper()).map([]) == []

    def test_each_element_mapped_independently(self) -> None:
        """Every element goes through the scalar mapper exactly once."""
        scalar = _UpperMapper()
        ListMapper(scalar).map(("x", "y"))

        assert scalar.calls == ["x", "y"]

    def test_lifts_address_mapper(self) -> None:
        """ListMapper agrees with the scalar mapper element by element."""
        scalar = DataAddressToDomainAddressMapper()
        records = [
            DataAddress("1", "FancyStreet", "1", "CoolCity"),
            DataAddress("2", "Elm", "9", "Oak Town"),
        ]

        assert ListMapper(scalar).map(records) == [scalar.map(r) for r in records]


class TestDataAddressToDomainAddressMapper:
    """Tests for the data → domain mapper."""

    def test_renames_fields(self) -> None:
        """Every field is carried forward unchanged under its domain name."""
        domain = DataAddressToDomainAddressMapper().map(
            DataAddress("1", "FancyStreet", "1", "CoolCity")
        )

        assert domain == DomainAddress(
            id="1", street_name="FancyStreet", street_number="1", city="CoolCity"
        )
        assert domain.full_address == "FancyStreet 1\nCoolCity"

    def test_is_deterministic(self) -> None:
        mapper = DataAddressToDomainAddressMapper()
        record = DataAddress("3", "Long Road", "12", "Far")

        assert mapper.map(record) == mapper.map(record)


class TestDomainAddressToAddressMapper:
    """Tests for the domain → presentation mapper."""

    def test_passes_full_address_through(self) -> None:
        domain = DomainAddress("5", "Side", "3", "Hill")

        address = DomainAddressToAddressMapper().map(domain)

        assert address == Address(full_address=domain.full_address)

    def test_narrows_to_render_fields(self) -> None:
        """Only full_address survives in the presentation model."""
        address = DomainAddressToAddressMapper().map(
            DomainAddress("1", "FancyStreet", "1", "CoolCity")
        )

        assert address.model_dump() == {"full_address": "FancyStreet 1\nCoolCity"}

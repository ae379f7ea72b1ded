"""
Tests for the address domain layer.

Tests domain entities and error classes in isolation.
No external dependencies or IO required.
"""

import dataclasses

import pytest

from mapper_pattern.domain.address.entities import DomainAddress
from mapper_pattern.domain.address.errors import (
    AddressDomainError,
    AddressNotFoundError,
)


class TestDomainAddressEntity:
    """Tests for the DomainAddress entity."""

    def test_full_address_is_two_lines(self) -> None:
        """full_address puts street and number first, city second."""
        address = DomainAddress("1", "FancyStreet", "1", "CoolCity")

        assert address.full_address == "FancyStreet 1\nCoolCity"

    def test_full_address_follows_fields(self) -> None:
        """The derived field is computed from the entity's own fields."""
        address = DomainAddress("7", "Main", "42b", "Springfield")

        assert address.full_address == "Main 42b\nSpringfield"

    def test_entity_is_immutable(self) -> None:
        """DomainAddress cannot be mutated after creation."""
        address = DomainAddress("1", "FancyStreet", "1", "CoolCity")

        with pytest.raises(dataclasses.FrozenInstanceError):
            address.city = "Elsewhere"  # type: ignore[misc]

    def test_equality_is_by_value(self) -> None:
        assert DomainAddress("1", "A", "2", "B") == DomainAddress("1", "A", "2", "B")


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_not_found_without_id(self) -> None:
        """AddressNotFoundError has a plain message when no id is known."""
        error = AddressNotFoundError()

        assert error.message == "Address not found"
        assert error.address_id is None

    def test_not_found_with_id(self) -> None:
        """AddressNotFoundError contains the id in its message."""
        error = AddressNotFoundError("42")

        assert "42" in str(error)
        assert error.address_id == "42"

    def test_not_found_is_domain_error(self) -> None:
        assert isinstance(AddressNotFoundError(), AddressDomainError)

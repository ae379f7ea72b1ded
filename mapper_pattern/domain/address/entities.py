"""
Domain entities for the address bounded context.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DomainAddress:
    """A postal address in its canonical in-application shape."""

    id: str
    street_name: str
    street_number: str
    city: str

    @property
    def full_address(self) -> str:
        """Return the two-line rendering: street and number, then city."""
        return f"{self.street_name} {self.street_number}\n{self.city}"

"""
Domain-specific errors for the address bounded context.

All errors raised while resolving an address are defined here.
They are mapped to exit codes by the shared error handlers.
"""


class AddressDomainError(Exception):
    """Base error for all address domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class AddressNotFoundError(AddressDomainError):
    """Raised when the backing store holds no address record."""

    def __init__(self, address_id: str | None = None) -> None:
        if address_id is None:
            super().__init__("Address not found")
        else:
            super().__init__(f"Address not found: {address_id}")
        self.address_id = address_id

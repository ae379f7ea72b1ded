"""
Errors raised when a closed variant set is violated.

No framework imports allowed.
"""


class ClosedVariantSetError(Exception):
    """Base error for closed variant set violations."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class UnhandledVariantError(ClosedVariantSetError):
    """Raised when a dispatch receives a value outside its declared variants."""

    def __init__(self, value: object) -> None:
        super().__init__(f"Unhandled variant: {value!r}")
        self.value = value


class UndeclaredVariantError(ClosedVariantSetError):
    """Raised when code tries to add a variant to a sealed base."""

    def __init__(self, base: str, variant: str) -> None:
        super().__init__(f"{variant} is not a declared variant of {base}")
        self.base = base
        self.variant = variant

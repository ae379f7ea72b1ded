"""
Capability interface.

HttpErrorInterface is a pure contract: it has no constructor and holds no
state, so a status code cannot be declared on it. Each variant is an
independent type that satisfies the contract and owns its own data.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from mapper_pattern.domain.http_errors.errors import (
    UndeclaredVariantError,
    UnhandledVariantError,
)


class HttpErrorInterface(ABC):
    """Sealed capability contract of the HTTP error set."""

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise UndeclaredVariantError("HttpErrorInterface", cls.__name__)

    @abstractmethod
    def do_nothing(self) -> None:
        """Capability every variant must provide."""
        raise NotImplementedError


@dataclass(frozen=True)
class Unauthorized(HttpErrorInterface):
    """The caller is not allowed in. ``reason`` says why."""

    reason: str

    def do_nothing(self) -> None:
        pass


@dataclass(frozen=True)
class NotFound(HttpErrorInterface):
    """The requested resource does not exist."""

    def do_nothing(self) -> None:
        pass


HttpErrorInterfaceVariant = Unauthorized | NotFound


def describe(error: HttpErrorInterfaceVariant) -> str:
    """Dispatch over every capability variant.

    Raises:
        UnhandledVariantError: If ``error`` is not a declared variant.
    """
    if isinstance(error, Unauthorized):
        return f"Unauthorized: {error.reason}"
    if isinstance(error, NotFound):
        return "Not Found"
    raise UnhandledVariantError(error)

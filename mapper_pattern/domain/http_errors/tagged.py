"""
Tagged variant with payload.

HttpError owns the status code as shared construction state; each variant
fixes its own code and may add a payload of its own. Only Unauthorized
carries one (the diagnostic reason).
"""

from dataclasses import dataclass, field

from mapper_pattern.domain.http_errors.errors import (
    UndeclaredVariantError,
    UnhandledVariantError,
)


@dataclass(frozen=True)
class HttpError:
    """Sealed base of the tagged HTTP error set."""

    code: int

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise UndeclaredVariantError("HttpError", cls.__name__)

    def __post_init__(self) -> None:
        if type(self) is HttpError:
            raise UndeclaredVariantError("HttpError", "HttpError")

    def do_nothing(self) -> None:
        """Shared behaviour inherited by every variant."""


@dataclass(frozen=True)
class Unauthorized(HttpError):
    """The caller is not allowed in. ``reason`` says why."""

    code: int = field(default=401, init=False)
    reason: str


@dataclass(frozen=True)
class NotFound(HttpError):
    """The requested resource does not exist."""

    code: int = field(default=404, init=False)


HttpErrorVariant = Unauthorized | NotFound


def describe(error: HttpErrorVariant) -> str:
    """Dispatch over every tagged variant.

    Raises:
        UnhandledVariantError: If ``error`` is not a declared variant.
    """
    if isinstance(error, Unauthorized):
        return f"{error.code} Unauthorized: {error.reason}"
    if isinstance(error, NotFound):
        return f"{error.code} Not Found"
    raise UnhandledVariantError(error)

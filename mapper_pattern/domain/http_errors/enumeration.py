"""
Fixed ordinal set.

Every member is declared once with its status code. Members cannot carry
per-instance payloads, so Unauthorized has no reason, but the whole set
can be iterated at runtime.
"""

from enum import Enum

from mapper_pattern.domain.http_errors.errors import UnhandledVariantError


class HttpErrorEnum(Enum):
    """HTTP error kinds with their status codes."""

    UNAUTHORIZED = 401
    NOT_FOUND = 404

    @property
    def code(self) -> int:
        """Status code declared with the member."""
        return self.value

    def do_nothing(self) -> None:
        pass


def all_variants() -> list[HttpErrorEnum]:
    """Return every member in declaration order."""
    return list(HttpErrorEnum)


def describe(error: HttpErrorEnum) -> str:
    """Dispatch over every enum member.

    Raises:
        UnhandledVariantError: If ``error`` is not a member.
    """
    if error is HttpErrorEnum.UNAUTHORIZED:
        return f"{error.code} Unauthorized"
    if error is HttpErrorEnum.NOT_FOUND:
        return f"{error.code} Not Found"
    raise UnhandledVariantError(error)

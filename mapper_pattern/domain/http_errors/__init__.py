"""
Closed HTTP error sets.

The same two failures, Unauthorized(reason) and NotFound, expressed
three ways:

- tagged: a base class with shared construction state (the status code)
  and payload-carrying dataclass variants.
- capability: an abstract capability contract implemented by independent
  variant types with no shared construction state.
- enumeration: a fixed, iterable set of named constants carrying only the
  code declared with them.

Each form ships an exhaustive ``describe`` dispatch that raises
UnhandledVariantError for anything outside the declared set.
"""

from mapper_pattern.domain.http_errors.capability import HttpErrorInterface
from mapper_pattern.domain.http_errors.enumeration import HttpErrorEnum
from mapper_pattern.domain.http_errors.errors import (
    ClosedVariantSetError,
    UndeclaredVariantError,
    UnhandledVariantError,
)
from mapper_pattern.domain.http_errors.tagged import HttpError

__all__ = [
    "ClosedVariantSetError",
    "HttpError",
    "HttpErrorEnum",
    "HttpErrorInterface",
    "UndeclaredVariantError",
    "UnhandledVariantError",
]

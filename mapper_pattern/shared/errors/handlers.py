"""
Centralized error handlers for the entry point.

Maps domain-specific errors to process exit codes.
No stack traces are written for expected domain failures.
"""

import logging

from mapper_pattern.domain.address.errors import (
    AddressDomainError,
    AddressNotFoundError,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_DOMAIN_ERROR = 1


def handle_domain_error(exc: AddressDomainError) -> int:
    """Log a domain error and return the exit code to report.

    Args:
        exc: The domain error raised while running the pipeline.

    Returns:
        The process exit code.
    """
    if isinstance(exc, AddressNotFoundError):
        logger.warning("%s", exc.message)
        return EXIT_DOMAIN_ERROR

    logger.error("Unhandled address domain error: %s", exc.message)
    return EXIT_DOMAIN_ERROR

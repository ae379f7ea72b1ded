"""
Application entry point.

Wires together:
- Logging configuration and the optional startup banner (stderr)
- The address view (data source → repository → use case → view-model)
- Error handlers (centralized domain-to-exit-code mapping)

No business logic belongs here.
"""

import sys
from typing import TextIO

from mapper_pattern.core.config import settings
from mapper_pattern.domain.address.errors import AddressDomainError
from mapper_pattern.infrastructure.address.database import AppDatabase
from mapper_pattern.interfaces.address.dependencies import get_address_view
from mapper_pattern.shared.errors.handlers import EXIT_OK, handle_domain_error
from mapper_pattern.shared.logging import configure_logging


def main(
    app_database: AppDatabase | None = None,
    stream: TextIO | None = None,
) -> int:
    """Render the stored address and return the process exit code.

    Args:
        app_database: Store to read from. Defaults to the in-memory mock.
        stream: Output stream. Defaults to stdout.

    Returns:
        0 on success, non-zero when a domain error was raised.
    """
    configure_logging(level=settings.log_level)

    if settings.show_banner:
        sys.stderr.write(f"{settings.project_name} {settings.version}\n")

    view = get_address_view(app_database, stream=stream)
    try:
        view.display_address_data()
    except AddressDomainError as exc:
        return handle_domain_error(exc)

    return EXIT_OK

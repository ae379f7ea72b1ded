"""
Side-by-side usage of the three closed HTTP error sets.

Builds one value per form, dispatches each exhaustively and shows that
only the enumeration can be iterated.
"""

import logging

from mapper_pattern.domain.http_errors import capability, enumeration, tagged

logger = logging.getLogger(__name__)


def usage_examples() -> list[str]:
    """Return the dispatch result of each form, enum members last."""
    sealed_error = tagged.Unauthorized("token not valid")
    sealed_interface_error = capability.Unauthorized("token not valid")
    enum_error = enumeration.HttpErrorEnum.UNAUTHORIZED

    descriptions = [
        tagged.describe(sealed_error),
        capability.describe(sealed_interface_error),
        enumeration.describe(enum_error),
    ]

    # Only possible with the enumeration.
    for member in enumeration.all_variants():
        descriptions.append(enumeration.describe(member))

    logger.debug("Dispatched %d HTTP error examples", len(descriptions))
    return descriptions

"""
Address view.

The only layer that produces output. Writes the presentation model
as-is, without decoration or a trailing newline.
"""

import sys
from typing import TextIO

from mapper_pattern.interfaces.address.view_model import AddressViewModel


class AddressView:
    """Renders the address exposed by an AddressViewModel."""

    def __init__(
        self, view_model: AddressViewModel, stream: TextIO | None = None
    ) -> None:
        self._view_model = view_model
        self._stream = stream

    def display_address_data(self) -> None:
        """Write the full address to the output stream."""
        address = self._view_model.address
        stream = self._stream or sys.stdout
        stream.write(address.full_address)
        stream.flush()

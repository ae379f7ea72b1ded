"""
Pydantic presentation models for the address view.

Only the fields the view renders survive here.
"""

from pydantic import BaseModel, ConfigDict


class Address(BaseModel):
    """Render-ready address.

    Attributes:
        full_address: Street and number on the first line, city on the second.
    """

    model_config = ConfigDict(frozen=True)

    full_address: str

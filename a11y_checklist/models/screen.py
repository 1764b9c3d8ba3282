"""Models for the screens audited by the checklist."""

from typing import Literal

from pydantic import Field

from a11y_checklist.models.base import Model

ColorTag = Literal["blue", "green", "purple", "gray", "orange", "indigo"]


class Screen(Model):
    """One statically enumerated surface of the host application."""

    id: str = Field(..., description="Stable identifier, also the display name")
    description: str = Field(..., description="Short static description")
    icon: str = Field(..., description="Symbol name of the screen pictogram")
    color_tag: ColorTag = Field(..., description="Color category of the icon")

    @property
    def display_name(self) -> str:
        """Name shown in lists and headers."""
        return self.id

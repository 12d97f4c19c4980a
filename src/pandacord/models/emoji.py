"""
Emoji model — https://discord.com/developers/docs/resources/emoji#emoji-object
"""

from typing import Optional

from pydantic import StrictBool, StrictStr

from pandacord.models.base import Entity
from pandacord.models.user import User


class Emoji(Entity):
    # Both are null for deleted custom emojis in reaction payloads; unicode emojis have no id.
    id: Optional[StrictStr] = None
    name: Optional[StrictStr] = None
    roles: tuple[StrictStr, ...] = ()
    user: Optional[User] = None
    require_colons: Optional[StrictBool] = None
    managed: Optional[StrictBool] = None
    animated: Optional[StrictBool] = None
    available: Optional[StrictBool] = None

    @property
    def api_name(self) -> str:
        """Form expected by the reaction endpoints: ``name:id`` for custom emojis, the glyph otherwise."""
        if self.id:
            return f"{self.name}:{self.id}"
        return self.name or ""

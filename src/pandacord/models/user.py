"""
User models — https://discord.com/developers/docs/resources/user#user-object
"""

from typing import Optional

from pydantic import StrictBool, StrictInt, StrictStr

from pandacord.models.base import Entity


class User(Entity):
    id: StrictStr
    username: StrictStr
    discriminator: StrictStr
    avatar: Optional[StrictStr] = None
    bot: Optional[StrictBool] = None
    system: Optional[StrictBool] = None
    mfa_enabled: Optional[StrictBool] = None
    locale: Optional[StrictStr] = None
    verified: Optional[StrictBool] = None
    email: Optional[StrictStr] = None
    flags: Optional[StrictInt] = None
    premium_type: Optional[StrictInt] = None
    public_flags: Optional[StrictInt] = None

    @property
    def tag(self) -> str:
        return f"{self.username}#{self.discriminator}"

    @property
    def mention(self) -> str:
        return f"<@{self.id}>"


class PartialUser(Entity):
    """User as sent in presence updates: only ``id`` is guaranteed."""
    id: StrictStr
    username: Optional[StrictStr] = None
    discriminator: Optional[StrictStr] = None
    avatar: Optional[StrictStr] = None
    bot: Optional[StrictBool] = None

"""
Guild member model — https://discord.com/developers/docs/resources/guild#guild-member-object
"""

from typing import Optional

from pydantic import StrictBool, StrictStr

from pandacord.models.base import Entity
from pandacord.models.user import User


class GuildMember(Entity):
    # Absent when the member is attached to a message or reaction that already carries the user.
    user: Optional[User] = None
    nick: Optional[StrictStr] = None
    roles: tuple[StrictStr, ...]
    joined_at: StrictStr
    premium_since: Optional[StrictStr] = None
    deaf: StrictBool
    mute: StrictBool
    pending: Optional[StrictBool] = None

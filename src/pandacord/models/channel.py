"""
Channel models — https://discord.com/developers/docs/resources/channel
"""

from enum import IntEnum
from typing import Annotated, Optional, Union

from pydantic import StrictBool, StrictInt, StrictStr

from pandacord.models.base import Entity, IntCode
from pandacord.models.emoji import Emoji
from pandacord.models.user import User


class ChannelType(IntEnum):
    GUILD_TEXT = 0
    DM = 1
    GUILD_VOICE = 2
    GROUP_DM = 3
    GUILD_CATEGORY = 4
    GUILD_NEWS = 5
    GUILD_STORE = 6


class Overwrite(Entity):
    id: StrictStr
    # "role"/"member" on v6, 0/1 on later gateway versions; allow/deny likewise int vs string.
    type: Union[StrictStr, StrictInt]
    allow: Union[StrictStr, StrictInt]
    deny: Union[StrictStr, StrictInt]


class Channel(Entity):
    id: StrictStr
    type: Annotated[ChannelType, IntCode]
    guild_id: Optional[StrictStr] = None
    position: Optional[StrictInt] = None
    permission_overwrites: tuple[Overwrite, ...] = ()
    name: Optional[StrictStr] = None
    topic: Optional[StrictStr] = None
    nsfw: Optional[StrictBool] = None
    last_message_id: Optional[StrictStr] = None
    bitrate: Optional[StrictInt] = None
    user_limit: Optional[StrictInt] = None
    rate_limit_per_user: Optional[StrictInt] = None
    recipients: tuple[User, ...] = ()
    icon: Optional[StrictStr] = None
    owner_id: Optional[StrictStr] = None
    application_id: Optional[StrictStr] = None
    parent_id: Optional[StrictStr] = None
    last_pin_timestamp: Optional[StrictStr] = None

    @property
    def mention(self) -> str:
        return f"<#{self.id}>"


class MentionChannel(Entity):
    id: StrictStr
    guild_id: StrictStr
    type: Annotated[ChannelType, IntCode]
    name: StrictStr


class Attachment(Entity):
    id: StrictStr
    filename: StrictStr
    size: StrictInt
    url: StrictStr
    proxy_url: StrictStr
    height: Optional[StrictInt] = None
    width: Optional[StrictInt] = None


class Reaction(Entity):
    count: StrictInt
    me: StrictBool
    emoji: Emoji


class MessageApplication(Entity):
    """Rich Presence application attached to a message."""
    id: StrictStr
    cover_image: Optional[StrictStr] = None
    description: StrictStr
    icon: Optional[StrictStr] = None
    name: StrictStr


class MessageReference(Entity):
    """Link back to the source of a crossposted message."""
    message_id: Optional[StrictStr] = None
    channel_id: Optional[StrictStr] = None
    guild_id: Optional[StrictStr] = None

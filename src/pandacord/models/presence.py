"""
Presence models — https://discord.com/developers/docs/topics/gateway#presence-update
"""

from enum import Enum
from typing import Annotated, Optional

from pydantic import StrictInt, StrictStr

from pandacord.models.base import Entity, StrCode
from pandacord.models.emoji import Emoji
from pandacord.models.user import PartialUser


class Status(str, Enum):
    ONLINE = "online"
    IDLE = "idle"
    DND = "dnd"
    INVISIBLE = "invisible"
    OFFLINE = "offline"


class ActivityTimestamps(Entity):
    start: Optional[StrictInt] = None
    end: Optional[StrictInt] = None


class Activity(Entity):
    name: StrictStr
    type: StrictInt
    url: Optional[StrictStr] = None
    created_at: Optional[StrictInt] = None
    timestamps: Optional[ActivityTimestamps] = None
    application_id: Optional[StrictStr] = None
    details: Optional[StrictStr] = None
    state: Optional[StrictStr] = None
    emoji: Optional[Emoji] = None
    flags: Optional[StrictInt] = None


class ClientStatus(Entity):
    desktop: Optional[StrictStr] = None
    mobile: Optional[StrictStr] = None
    web: Optional[StrictStr] = None


class Presence(Entity):
    user: PartialUser
    roles: tuple[StrictStr, ...] = ()
    game: Optional[Activity] = None
    guild_id: Optional[StrictStr] = None
    status: Annotated[Status, StrCode]
    activities: tuple[Activity, ...] = ()
    client_status: Optional[ClientStatus] = None
    premium_since: Optional[StrictStr] = None
    nick: Optional[StrictStr] = None

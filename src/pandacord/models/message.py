"""
Message model and convenience actions —
https://discord.com/developers/docs/resources/channel#message-object

Actions take the REST client explicitly; a Message never holds one. None of
them touch the message itself: pinning does not flip ``pinned``, the next
MESSAGE_UPDATE carries the new state.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Annotated, Optional, Union

from pydantic import AliasChoices, Field, StrictBool, StrictInt, StrictStr

from pandacord.models.base import Entity, IntCode
from pandacord.models.channel import (
    Attachment,
    MentionChannel,
    MessageApplication,
    MessageReference,
    Reaction,
)
from pandacord.models.embed import Embed
from pandacord.models.member import GuildMember
from pandacord.models.user import User

if TYPE_CHECKING:
    from pandacord.transport.http import HttpClient


class MessageKind(IntEnum):
    REGULAR = 0
    RECIPIENT_ADD = 1
    RECIPIENT_REMOVE = 2
    CALL = 3
    CHANNEL_NAME_CHANGE = 4
    CHANNEL_ICON_CHANGE = 5
    CHANNEL_PINNED_MESSAGE = 6
    GUILD_MEMBER_JOIN = 7
    USER_PREMIUM_GUILD_SUBSCRIPTION = 8
    USER_PREMIUM_GUILD_SUBSCRIPTION_TIER_1 = 9
    USER_PREMIUM_GUILD_SUBSCRIPTION_TIER_2 = 10
    USER_PREMIUM_GUILD_SUBSCRIPTION_TIER_3 = 11
    CHANNEL_FOLLOW_ADD = 12
    GUILD_DISCOVERY_DISQUALIFIED = 14
    GUILD_DISCOVERY_REQUALIFIED = 15


class Message(Entity):
    id: StrictStr
    channel_id: StrictStr
    guild_id: Optional[StrictStr] = None
    author: User
    # Only present for messages received in a guild; carries no ``user``.
    member: Optional[GuildMember] = None
    content: StrictStr
    timestamp: StrictStr
    edited_timestamp: Optional[StrictStr] = None
    tts: StrictBool
    mention_everyone: StrictBool
    mentions: tuple[User, ...]
    mention_roles: tuple[StrictStr, ...]
    mentions_channels: tuple[MentionChannel, ...] = Field(
        default=(), validation_alias=AliasChoices("mentions_channels", "mention_channels"),
    )
    attachments: tuple[Attachment, ...]
    embed: tuple[Embed, ...] = Field(default=(), validation_alias=AliasChoices("embed", "embeds"))
    reactions: tuple[Reaction, ...] = ()
    nonce: Optional[Union[StrictStr, StrictInt]] = None
    pinned: StrictBool
    webhook_id: Optional[StrictStr] = None
    kind: Optional[Annotated[MessageKind, IntCode]] = Field(
        default=None, validation_alias=AliasChoices("type", "kind"),
    )
    application: Optional[MessageApplication] = None
    message_reference: Optional[MessageReference] = None
    flags: Optional[StrictInt] = None

    async def send(self, http: HttpClient, content: str) -> Message:
        """Post ``content`` to this message's channel."""
        return await http.send_message(self.channel_id, content)

    async def send_embed(self, http: HttpClient, embed: Embed) -> Message:
        """Post ``embed`` to this message's channel."""
        return await http.send_embed(self.channel_id, embed)

    async def add_reaction(self, http: HttpClient, emoji: str) -> None:
        """React to this message. ``emoji`` is a unicode glyph or ``name:id``."""
        await http.add_reaction(self.channel_id, self.id, emoji)

    async def add_reaction_to_message(self, http: HttpClient, message_id: str, emoji: str) -> None:
        """React to another message in this message's channel."""
        await http.add_reaction(self.channel_id, message_id, emoji)

    async def remove(self, http: HttpClient) -> None:
        """Delete this message."""
        await http.delete_message(self.channel_id, self.id)

    async def pin(self, http: HttpClient) -> None:
        await http.pin_message(self.channel_id, self.id)

    async def unpin(self, http: HttpClient) -> None:
        await http.unpin_message(self.channel_id, self.id)

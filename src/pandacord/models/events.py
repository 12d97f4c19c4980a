"""
Dispatch event models — https://discord.com/developers/docs/topics/gateway#commands-and-events

One class per dispatch tag. Where the gateway sends a bare entity as ``d``
the event wraps it in a single field (``MessageCreate.message``); where the
payload is event-specific the fields live on the event itself.
"""

from enum import Enum
from typing import Annotated, ClassVar, Optional, Union

from pydantic import AliasChoices, Field, StrictBool, StrictInt, StrictStr

from pandacord.models.base import Entity, IntCode
from pandacord.models.channel import (
    Attachment,
    Channel,
    MentionChannel,
    MessageApplication,
    MessageReference,
    Reaction,
)
from pandacord.models.embed import Embed
from pandacord.models.emoji import Emoji
from pandacord.models.guild import Guild, Role, UnavailableGuild
from pandacord.models.member import GuildMember
from pandacord.models.message import Message, MessageKind
from pandacord.models.presence import Presence
from pandacord.models.user import User
from pandacord.models.voice import VoiceState


class DispatchType(str, Enum):
    READY = "READY"
    RESUMED = "RESUMED"
    RECONNECT = "RECONNECT"

    CHANNEL_CREATE = "CHANNEL_CREATE"
    CHANNEL_UPDATE = "CHANNEL_UPDATE"
    CHANNEL_DELETE = "CHANNEL_DELETE"
    CHANNEL_PINS_UPDATE = "CHANNEL_PINS_UPDATE"

    GUILD_CREATE = "GUILD_CREATE"
    GUILD_UPDATE = "GUILD_UPDATE"
    GUILD_DELETE = "GUILD_DELETE"
    GUILD_BAN_ADD = "GUILD_BAN_ADD"
    GUILD_BAN_REMOVE = "GUILD_BAN_REMOVE"
    GUILD_EMOJIS_UPDATE = "GUILD_EMOJIS_UPDATE"
    GUILD_INTEGRATIONS_UPDATE = "GUILD_INTEGRATIONS_UPDATE"
    GUILD_MEMBER_ADD = "GUILD_MEMBER_ADD"
    GUILD_MEMBER_REMOVE = "GUILD_MEMBER_REMOVE"
    GUILD_MEMBER_UPDATE = "GUILD_MEMBER_UPDATE"
    GUILD_MEMBERS_CHUNK = "GUILD_MEMBERS_CHUNK"
    GUILD_ROLE_CREATE = "GUILD_ROLE_CREATE"
    GUILD_ROLE_UPDATE = "GUILD_ROLE_UPDATE"
    GUILD_ROLE_DELETE = "GUILD_ROLE_DELETE"

    MESSAGE_CREATE = "MESSAGE_CREATE"
    MESSAGE_UPDATE = "MESSAGE_UPDATE"
    MESSAGE_DELETE = "MESSAGE_DELETE"
    MESSAGE_DELETE_BULK = "MESSAGE_DELETE_BULK"
    MESSAGE_REACTION_ADD = "MESSAGE_REACTION_ADD"
    MESSAGE_REACTION_REMOVE = "MESSAGE_REACTION_REMOVE"
    MESSAGE_REACTION_REMOVE_ALL = "MESSAGE_REACTION_REMOVE_ALL"
    MESSAGE_REACTION_REMOVE_EMOJI = "MESSAGE_REACTION_REMOVE_EMOJI"

    PRESENCE_UPDATE = "PRESENCE_UPDATE"
    TYPING_START = "TYPING_START"
    USER_UPDATE = "USER_UPDATE"

    VOICE_STATE_UPDATE = "VOICE_STATE_UPDATE"
    VOICE_SERVER_UPDATE = "VOICE_SERVER_UPDATE"


class DispatchEvent(Entity):
    event_type: ClassVar[DispatchType]


# Session

class Ready(DispatchEvent):
    event_type = DispatchType.READY

    v: StrictInt
    user: User
    private_channels: tuple[Channel, ...] = ()
    guilds: tuple[UnavailableGuild, ...]
    session_id: StrictStr
    shard: Optional[tuple[StrictInt, StrictInt]] = None


class Resumed(DispatchEvent):
    event_type = DispatchType.RESUMED


class ReconnectRequested(DispatchEvent):
    event_type = DispatchType.RECONNECT


# Channel

class ChannelCreate(DispatchEvent):
    event_type = DispatchType.CHANNEL_CREATE
    channel: Channel


class ChannelUpdate(DispatchEvent):
    event_type = DispatchType.CHANNEL_UPDATE
    channel: Channel


class ChannelDelete(DispatchEvent):
    event_type = DispatchType.CHANNEL_DELETE
    channel: Channel


class ChannelPinsUpdate(DispatchEvent):
    event_type = DispatchType.CHANNEL_PINS_UPDATE

    guild_id: Optional[StrictStr] = None
    channel_id: StrictStr
    last_pin_timestamp: Optional[StrictStr] = None


# Guild

class GuildCreate(DispatchEvent):
    event_type = DispatchType.GUILD_CREATE
    guild: Guild


class GuildUpdate(DispatchEvent):
    event_type = DispatchType.GUILD_UPDATE
    guild: Guild


class GuildDelete(DispatchEvent):
    event_type = DispatchType.GUILD_DELETE
    guild: UnavailableGuild


class GuildBanAdd(DispatchEvent):
    event_type = DispatchType.GUILD_BAN_ADD

    guild_id: StrictStr
    user: User


class GuildBanRemove(DispatchEvent):
    event_type = DispatchType.GUILD_BAN_REMOVE

    guild_id: StrictStr
    user: User


class GuildEmojisUpdate(DispatchEvent):
    event_type = DispatchType.GUILD_EMOJIS_UPDATE

    guild_id: StrictStr
    emojis: tuple[Emoji, ...]


class GuildIntegrationsUpdate(DispatchEvent):
    event_type = DispatchType.GUILD_INTEGRATIONS_UPDATE

    guild_id: StrictStr


class GuildMemberAdd(GuildMember, DispatchEvent):
    """The new member's fields plus the guild they joined."""
    event_type = DispatchType.GUILD_MEMBER_ADD

    guild_id: StrictStr


class GuildMemberRemove(DispatchEvent):
    event_type = DispatchType.GUILD_MEMBER_REMOVE

    guild_id: StrictStr
    user: User


class GuildMemberUpdate(DispatchEvent):
    event_type = DispatchType.GUILD_MEMBER_UPDATE

    guild_id: StrictStr
    roles: tuple[StrictStr, ...]
    user: User
    nick: Optional[StrictStr] = None
    premium_since: Optional[StrictStr] = None


class GuildMembersChunk(DispatchEvent):
    event_type = DispatchType.GUILD_MEMBERS_CHUNK

    guild_id: StrictStr
    members: tuple[GuildMember, ...]
    chunk_index: StrictInt
    chunk_count: StrictInt
    not_found: tuple[StrictStr, ...] = ()
    presences: tuple[Presence, ...] = ()
    nonce: Optional[StrictStr] = None


class GuildRoleCreate(DispatchEvent):
    event_type = DispatchType.GUILD_ROLE_CREATE

    guild_id: StrictStr
    role: Role


class GuildRoleUpdate(DispatchEvent):
    event_type = DispatchType.GUILD_ROLE_UPDATE

    guild_id: StrictStr
    role: Role


class GuildRoleDelete(DispatchEvent):
    event_type = DispatchType.GUILD_ROLE_DELETE

    guild_id: StrictStr
    role_id: StrictStr


# Message

class MessageCreate(DispatchEvent):
    event_type = DispatchType.MESSAGE_CREATE
    message: Message


class MessageUpdate(DispatchEvent):
    """Partial message: only ``id`` and ``channel_id`` are guaranteed, absent fields did not change."""
    event_type = DispatchType.MESSAGE_UPDATE

    id: StrictStr
    channel_id: StrictStr
    guild_id: Optional[StrictStr] = None
    author: Optional[User] = None
    member: Optional[GuildMember] = None
    content: Optional[StrictStr] = None
    timestamp: Optional[StrictStr] = None
    edited_timestamp: Optional[StrictStr] = None
    tts: Optional[StrictBool] = None
    mention_everyone: Optional[StrictBool] = None
    mentions: Optional[tuple[User, ...]] = None
    mention_roles: Optional[tuple[StrictStr, ...]] = None
    mentions_channels: Optional[tuple[MentionChannel, ...]] = Field(
        default=None, validation_alias=AliasChoices("mentions_channels", "mention_channels"),
    )
    attachments: Optional[tuple[Attachment, ...]] = None
    embed: Optional[tuple[Embed, ...]] = Field(default=None, validation_alias=AliasChoices("embed", "embeds"))
    reactions: Optional[tuple[Reaction, ...]] = None
    nonce: Optional[Union[StrictStr, StrictInt]] = None
    pinned: Optional[StrictBool] = None
    webhook_id: Optional[StrictStr] = None
    kind: Optional[Annotated[MessageKind, IntCode]] = Field(
        default=None, validation_alias=AliasChoices("type", "kind"),
    )
    application: Optional[MessageApplication] = None
    message_reference: Optional[MessageReference] = None
    flags: Optional[StrictInt] = None


class MessageDelete(DispatchEvent):
    event_type = DispatchType.MESSAGE_DELETE

    id: StrictStr
    channel_id: StrictStr
    guild_id: Optional[StrictStr] = None


class MessageDeleteBulk(DispatchEvent):
    event_type = DispatchType.MESSAGE_DELETE_BULK

    ids: tuple[StrictStr, ...]
    channel_id: StrictStr
    guild_id: Optional[StrictStr] = None


class MessageReactionAdd(DispatchEvent):
    event_type = DispatchType.MESSAGE_REACTION_ADD

    user_id: StrictStr
    channel_id: StrictStr
    message_id: StrictStr
    guild_id: Optional[StrictStr] = None
    member: Optional[GuildMember] = None
    emoji: Emoji


class MessageReactionRemove(DispatchEvent):
    event_type = DispatchType.MESSAGE_REACTION_REMOVE

    user_id: StrictStr
    channel_id: StrictStr
    message_id: StrictStr
    guild_id: Optional[StrictStr] = None
    emoji: Emoji


class MessageReactionRemoveAll(DispatchEvent):
    event_type = DispatchType.MESSAGE_REACTION_REMOVE_ALL

    channel_id: StrictStr
    message_id: StrictStr
    guild_id: Optional[StrictStr] = None


class MessageReactionRemoveEmoji(DispatchEvent):
    event_type = DispatchType.MESSAGE_REACTION_REMOVE_EMOJI

    channel_id: StrictStr
    guild_id: Optional[StrictStr] = None
    message_id: StrictStr
    emoji: Emoji


# Presence

class PresenceUpdate(DispatchEvent):
    event_type = DispatchType.PRESENCE_UPDATE
    presence: Presence


class TypingStart(DispatchEvent):
    event_type = DispatchType.TYPING_START

    channel_id: StrictStr
    guild_id: Optional[StrictStr] = None
    user_id: StrictStr
    # Unix time in seconds.
    timestamp: StrictInt
    member: Optional[GuildMember] = None


class UserUpdate(DispatchEvent):
    event_type = DispatchType.USER_UPDATE
    user: User


# Voice

class VoiceStateUpdate(DispatchEvent):
    event_type = DispatchType.VOICE_STATE_UPDATE
    state: VoiceState


class VoiceServerUpdate(DispatchEvent):
    event_type = DispatchType.VOICE_SERVER_UPDATE

    token: StrictStr
    guild_id: StrictStr
    # None while the voice server is being reallocated.
    endpoint: Optional[StrictStr] = None


AnyDispatchEvent = Union[
    Ready, Resumed, ReconnectRequested,
    ChannelCreate, ChannelUpdate, ChannelDelete, ChannelPinsUpdate,
    GuildCreate, GuildUpdate, GuildDelete, GuildBanAdd, GuildBanRemove,
    GuildEmojisUpdate, GuildIntegrationsUpdate, GuildMemberAdd, GuildMemberRemove,
    GuildMemberUpdate, GuildMembersChunk, GuildRoleCreate, GuildRoleUpdate, GuildRoleDelete,
    MessageCreate, MessageUpdate, MessageDelete, MessageDeleteBulk,
    MessageReactionAdd, MessageReactionRemove, MessageReactionRemoveAll, MessageReactionRemoveEmoji,
    PresenceUpdate, TypingStart, UserUpdate,
    VoiceStateUpdate, VoiceServerUpdate,
]

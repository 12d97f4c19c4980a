"""
Dispatch type registry: maps a dispatch tag (the envelope's ``t``) to the
routine that decodes ``d`` into one event model.

Matching is exact and case-sensitive. An unknown tag is an error, never a
silent drop; a known tag with a bad body is a format error naming that tag.
"""

import logging
from typing import Any, Callable, Optional

from pydantic import ValidationError

from pandacord.errors import PayloadFormatError, UnrecognizedDispatchError
from pandacord.models import events as ev

logger = logging.getLogger(__name__)

Decoder = Callable[[Any], ev.DispatchEvent]


def _flat(model: type[ev.DispatchEvent]) -> Decoder:
    """``d`` holds the event's own fields."""
    return model.model_validate


def _wrapped(model: type[ev.DispatchEvent], field: str) -> Decoder:
    """``d`` is a bare entity stored under ``field``."""
    def decode(data: Any) -> ev.DispatchEvent:
        return model.model_validate({field: data})
    return decode


def _empty(model: type[ev.DispatchEvent]) -> Decoder:
    """Events whose body carries nothing the client uses (e.g. ``_trace``)."""
    def decode(_data: Any) -> ev.DispatchEvent:
        return model()
    return decode


DISPATCH_DECODERS: dict[str, Decoder] = {
    ev.DispatchType.READY.value: _flat(ev.Ready),
    ev.DispatchType.RESUMED.value: _empty(ev.Resumed),
    ev.DispatchType.RECONNECT.value: _empty(ev.ReconnectRequested),

    ev.DispatchType.CHANNEL_CREATE.value: _wrapped(ev.ChannelCreate, "channel"),
    ev.DispatchType.CHANNEL_UPDATE.value: _wrapped(ev.ChannelUpdate, "channel"),
    ev.DispatchType.CHANNEL_DELETE.value: _wrapped(ev.ChannelDelete, "channel"),
    ev.DispatchType.CHANNEL_PINS_UPDATE.value: _flat(ev.ChannelPinsUpdate),

    ev.DispatchType.GUILD_CREATE.value: _wrapped(ev.GuildCreate, "guild"),
    ev.DispatchType.GUILD_UPDATE.value: _wrapped(ev.GuildUpdate, "guild"),
    ev.DispatchType.GUILD_DELETE.value: _wrapped(ev.GuildDelete, "guild"),
    ev.DispatchType.GUILD_BAN_ADD.value: _flat(ev.GuildBanAdd),
    ev.DispatchType.GUILD_BAN_REMOVE.value: _flat(ev.GuildBanRemove),
    ev.DispatchType.GUILD_EMOJIS_UPDATE.value: _flat(ev.GuildEmojisUpdate),
    ev.DispatchType.GUILD_INTEGRATIONS_UPDATE.value: _flat(ev.GuildIntegrationsUpdate),
    ev.DispatchType.GUILD_MEMBER_ADD.value: _flat(ev.GuildMemberAdd),
    ev.DispatchType.GUILD_MEMBER_REMOVE.value: _flat(ev.GuildMemberRemove),
    ev.DispatchType.GUILD_MEMBER_UPDATE.value: _flat(ev.GuildMemberUpdate),
    ev.DispatchType.GUILD_MEMBERS_CHUNK.value: _flat(ev.GuildMembersChunk),
    ev.DispatchType.GUILD_ROLE_CREATE.value: _flat(ev.GuildRoleCreate),
    ev.DispatchType.GUILD_ROLE_UPDATE.value: _flat(ev.GuildRoleUpdate),
    ev.DispatchType.GUILD_ROLE_DELETE.value: _flat(ev.GuildRoleDelete),

    ev.DispatchType.MESSAGE_CREATE.value: _wrapped(ev.MessageCreate, "message"),
    ev.DispatchType.MESSAGE_UPDATE.value: _flat(ev.MessageUpdate),
    ev.DispatchType.MESSAGE_DELETE.value: _flat(ev.MessageDelete),
    ev.DispatchType.MESSAGE_DELETE_BULK.value: _flat(ev.MessageDeleteBulk),
    ev.DispatchType.MESSAGE_REACTION_ADD.value: _flat(ev.MessageReactionAdd),
    ev.DispatchType.MESSAGE_REACTION_REMOVE.value: _flat(ev.MessageReactionRemove),
    ev.DispatchType.MESSAGE_REACTION_REMOVE_ALL.value: _flat(ev.MessageReactionRemoveAll),
    ev.DispatchType.MESSAGE_REACTION_REMOVE_EMOJI.value: _flat(ev.MessageReactionRemoveEmoji),

    ev.DispatchType.PRESENCE_UPDATE.value: _wrapped(ev.PresenceUpdate, "presence"),
    ev.DispatchType.TYPING_START.value: _flat(ev.TypingStart),
    ev.DispatchType.USER_UPDATE.value: _wrapped(ev.UserUpdate, "user"),

    ev.DispatchType.VOICE_STATE_UPDATE.value: _wrapped(ev.VoiceStateUpdate, "state"),
    ev.DispatchType.VOICE_SERVER_UPDATE.value: _flat(ev.VoiceServerUpdate),
}


def dispatch_types() -> list[str]:
    """Registered dispatch tags, in registration order."""
    return list(DISPATCH_DECODERS)


def get_decoder(event_type: str) -> Optional[Decoder]:
    return DISPATCH_DECODERS.get(event_type)


def parse_dispatch(event_type: str, data: Any) -> ev.AnyDispatchEvent:
    """Decode the body of a dispatch frame tagged ``event_type``."""
    decoder = DISPATCH_DECODERS.get(event_type)
    if decoder is None:
        raise UnrecognizedDispatchError(event_type)
    try:
        event = decoder(data)
    except ValidationError as e:
        raise PayloadFormatError(
            event_type,
            f"Invalid {event_type} payload: {e.error_count()} error(s)",
            details=e.errors(include_url=False),
        ) from e
    logger.debug("Decoded %s dispatch", event_type)
    return event

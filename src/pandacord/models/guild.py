"""
Guild models — https://discord.com/developers/docs/resources/guild
"""

from typing import Optional, Union

from pydantic import StrictBool, StrictInt, StrictStr

from pandacord.models.base import Entity
from pandacord.models.channel import Channel
from pandacord.models.emoji import Emoji
from pandacord.models.member import GuildMember
from pandacord.models.presence import Presence
from pandacord.models.voice import VoiceState


class Role(Entity):
    id: StrictStr
    name: StrictStr
    color: StrictInt
    hoist: StrictBool
    position: StrictInt
    # Integer bitset on v6, string on later versions.
    permissions: Union[StrictStr, StrictInt]
    managed: StrictBool
    mentionable: StrictBool

    @property
    def mention(self) -> str:
        return f"<@&{self.id}>"


class UnavailableGuild(Entity):
    """Guild stub sent in READY and GUILD_DELETE. ``unavailable`` absent means the user was removed."""
    id: StrictStr
    unavailable: Optional[StrictBool] = None


class Guild(Entity):
    id: StrictStr
    name: StrictStr
    icon: Optional[StrictStr] = None
    splash: Optional[StrictStr] = None
    discovery_splash: Optional[StrictStr] = None
    owner_id: Optional[StrictStr] = None
    region: Optional[StrictStr] = None
    afk_channel_id: Optional[StrictStr] = None
    afk_timeout: Optional[StrictInt] = None
    verification_level: Optional[StrictInt] = None
    default_message_notifications: Optional[StrictInt] = None
    explicit_content_filter: Optional[StrictInt] = None
    roles: tuple[Role, ...] = ()
    emojis: tuple[Emoji, ...] = ()
    features: tuple[StrictStr, ...] = ()
    mfa_level: Optional[StrictInt] = None
    application_id: Optional[StrictStr] = None
    system_channel_id: Optional[StrictStr] = None
    rules_channel_id: Optional[StrictStr] = None
    # The following are only sent with GUILD_CREATE.
    joined_at: Optional[StrictStr] = None
    large: Optional[StrictBool] = None
    unavailable: Optional[StrictBool] = None
    member_count: Optional[StrictInt] = None
    voice_states: tuple[VoiceState, ...] = ()
    members: tuple[GuildMember, ...] = ()
    channels: tuple[Channel, ...] = ()
    presences: tuple[Presence, ...] = ()
    max_presences: Optional[StrictInt] = None
    max_members: Optional[StrictInt] = None
    vanity_url_code: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    banner: Optional[StrictStr] = None
    premium_tier: Optional[StrictInt] = None
    premium_subscription_count: Optional[StrictInt] = None
    preferred_locale: Optional[StrictStr] = None

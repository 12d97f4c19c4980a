"""
Voice state model — https://discord.com/developers/docs/resources/voice#voice-state-object
"""

from typing import Optional

from pydantic import StrictBool, StrictStr

from pandacord.models.base import Entity
from pandacord.models.member import GuildMember


class VoiceState(Entity):
    guild_id: Optional[StrictStr] = None
    # None when the user left the voice channel.
    channel_id: Optional[StrictStr] = None
    user_id: StrictStr
    member: Optional[GuildMember] = None
    session_id: StrictStr
    deaf: StrictBool
    mute: StrictBool
    self_deaf: StrictBool
    self_mute: StrictBool
    self_stream: Optional[StrictBool] = None
    self_video: StrictBool
    suppress: StrictBool

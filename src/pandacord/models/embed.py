"""
Embed models — https://discord.com/developers/docs/resources/channel#embed-object

Embeds are both decoded from messages and built by callers for
``Message.send_embed``; every field is optional.
"""

from typing import Any, Optional

from pydantic import StrictBool, StrictInt, StrictStr

from pandacord.models.base import Entity


class EmbedFooter(Entity):
    text: StrictStr
    icon_url: Optional[StrictStr] = None
    proxy_icon_url: Optional[StrictStr] = None


class EmbedMedia(Entity):
    """Image, thumbnail or video."""
    url: Optional[StrictStr] = None
    proxy_url: Optional[StrictStr] = None
    height: Optional[StrictInt] = None
    width: Optional[StrictInt] = None


class EmbedProvider(Entity):
    name: Optional[StrictStr] = None
    url: Optional[StrictStr] = None


class EmbedAuthor(Entity):
    name: Optional[StrictStr] = None
    url: Optional[StrictStr] = None
    icon_url: Optional[StrictStr] = None
    proxy_icon_url: Optional[StrictStr] = None


class EmbedField(Entity):
    name: StrictStr
    value: StrictStr
    inline: Optional[StrictBool] = None


class Embed(Entity):
    title: Optional[StrictStr] = None
    type: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    url: Optional[StrictStr] = None
    timestamp: Optional[StrictStr] = None
    color: Optional[StrictInt] = None
    footer: Optional[EmbedFooter] = None
    image: Optional[EmbedMedia] = None
    thumbnail: Optional[EmbedMedia] = None
    video: Optional[EmbedMedia] = None
    provider: Optional[EmbedProvider] = None
    author: Optional[EmbedAuthor] = None
    fields: tuple[EmbedField, ...] = ()

    def to_payload(self) -> dict[str, Any]:
        """Request body form: unset fields are left out."""
        return self.model_dump(mode="json", exclude_none=True, exclude_defaults=True)

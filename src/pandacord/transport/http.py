"""
REST HTTP client — the subset of the channel endpoints that Message actions use.

No retries and no rate-limit handling: a failed call raises HttpError and the
caller decides what to do.
"""

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from pandacord.errors import HttpError, PayloadFormatError
from pandacord.models.embed import Embed
from pandacord.models.message import Message

DEFAULT_BASE_URL = "https://discord.com/api/v8"
USER_AGENT = "DiscordBot (https://github.com/pandacord/pandacord, 0.1.0)"

logger = logging.getLogger(__name__)


class HttpClient:
    def __init__(
        self,
        token: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._token = token
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
            timeout=timeout,
            transport=transport,
        )

    def set_token(self, token: str) -> None:
        self._token = token

    def _auth_headers(self) -> dict[str, str]:
        if self._token:
            return {"Authorization": f"Bot {self._token}"}
        return {}

    async def _request(self, method: str, path: str, body: Optional[dict[str, Any]] = None) -> Any:
        logger.debug("%s %s", method, path)
        resp = await self._client.request(method, path, json=body, headers=self._auth_headers())
        if resp.status_code >= 400:
            raise HttpError(resp.status_code, resp.text[:200])
        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise PayloadFormatError("body", f"{method} {path} returned a non-JSON body") from e

    @staticmethod
    def _message(data: Any) -> Message:
        try:
            return Message.model_validate(data)
        except ValidationError as e:
            raise PayloadFormatError("message", "Invalid message in REST response",
                                     details=e.errors(include_url=False)) from e

    async def send_message(self, channel_id: str, content: str) -> Message:
        data = await self._request("POST", f"/channels/{channel_id}/messages", {"content": content})
        return self._message(data)

    async def send_embed(self, channel_id: str, embed: Embed) -> Message:
        data = await self._request("POST", f"/channels/{channel_id}/messages", {"embed": embed.to_payload()})
        return self._message(data)

    async def add_reaction(self, channel_id: str, message_id: str, emoji: str) -> None:
        # Custom emojis are sent as name:id; the colon must survive encoding.
        encoded = quote(emoji, safe=":")
        await self._request("PUT", f"/channels/{channel_id}/messages/{message_id}/reactions/{encoded}/@me")

    async def delete_message(self, channel_id: str, message_id: str) -> None:
        await self._request("DELETE", f"/channels/{channel_id}/messages/{message_id}")

    async def pin_message(self, channel_id: str, message_id: str) -> None:
        await self._request("PUT", f"/channels/{channel_id}/pins/{message_id}")

    async def unpin_message(self, channel_id: str, message_id: str) -> None:
        await self._request("DELETE", f"/channels/{channel_id}/pins/{message_id}")

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpClient":
        return self

    async def __aexit__(self, *_exc: Any) -> None:
        await self.close()

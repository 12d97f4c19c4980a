"""
Gateway frame envelope — https://discord.com/developers/docs/topics/gateway#payloads

The transport hands over one envelope per received frame, already
decompressed and JSON-decoded (or as JSON text).
"""

from enum import IntEnum
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictInt, StrictStr, ValidationError

from pandacord.errors import PayloadFormatError


class Opcode(IntEnum):
    DISPATCH = 0
    HEARTBEAT = 1
    IDENTIFY = 2
    PRESENCE_UPDATE = 3
    VOICE_STATE_UPDATE = 4
    RESUME = 6
    RECONNECT = 7
    REQUEST_GUILD_MEMBERS = 8
    INVALID_SESSION = 9
    HELLO = 10
    HEARTBEAT_ACK = 11


class Payload(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Kept as a plain int so unknown opcodes reach the resolver and fail there.
    op: StrictInt
    d: Optional[Any] = None
    s: Optional[StrictInt] = None
    t: Optional[StrictStr] = None

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "Payload":
        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            raise _envelope_error(e) from e

    @classmethod
    def from_json(cls, text: Union[str, bytes]) -> "Payload":
        try:
            return cls.model_validate_json(text)
        except ValidationError as e:
            raise _envelope_error(e) from e


def _envelope_error(exc: ValidationError) -> PayloadFormatError:
    errors = exc.errors(include_url=False)
    loc = errors[0]["loc"] if errors else ()
    field = str(loc[0]) if loc else "payload"
    return PayloadFormatError(field, f"Invalid gateway envelope field {field!r}", details=errors)

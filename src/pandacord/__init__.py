"""
pandacord — gateway event decoding core for Discord-style chat clients.

Turns inbound gateway frames into typed events and gives messages a few
REST-backed convenience actions.
"""

from pandacord.errors import (
    PandaError,
    PayloadFormatError,
    UnrecognizedDispatchError,
    UnexpectedOpcodeError,
    HttpError,
)
from pandacord.gateway.dispatch import DISPATCH_DECODERS, dispatch_types, parse_dispatch
from pandacord.gateway.events import (
    AnyGatewayEvent,
    Dispatch,
    GatewayEvent,
    HeartbeatAck,
    HeartbeatRequest,
    Hello,
    InvalidSession,
    Reconnect,
    decode_frame,
    resolve_event,
)
from pandacord.gateway.payload import Opcode, Payload
from pandacord.models.embed import Embed
from pandacord.models.events import AnyDispatchEvent, DispatchEvent, DispatchType
from pandacord.models.message import Message, MessageKind
from pandacord.models.user import User
from pandacord.transport.http import HttpClient

__version__ = "0.1.0"
__all__ = [
    "PandaError",
    "PayloadFormatError",
    "UnrecognizedDispatchError",
    "UnexpectedOpcodeError",
    "HttpError",
    "DISPATCH_DECODERS",
    "dispatch_types",
    "parse_dispatch",
    "AnyGatewayEvent",
    "Dispatch",
    "GatewayEvent",
    "HeartbeatAck",
    "HeartbeatRequest",
    "Hello",
    "InvalidSession",
    "Reconnect",
    "decode_frame",
    "resolve_event",
    "Opcode",
    "Payload",
    "Embed",
    "AnyDispatchEvent",
    "DispatchEvent",
    "DispatchType",
    "Message",
    "MessageKind",
    "User",
    "HttpClient",
]

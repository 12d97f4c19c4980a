"""
Opcode resolution: turns one gateway envelope into one gateway event.

The resolver is pure and stateless. It never substitutes a default for a
malformed frame; every failure is raised as a PandaError subclass so the
caller can decide whether it is fatal for the connection.
"""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny, StrictInt, ValidationError

from pandacord.errors import PayloadFormatError, UnexpectedOpcodeError
from pandacord.gateway.dispatch import parse_dispatch
from pandacord.gateway.payload import Opcode, Payload
from pandacord.models.events import DispatchEvent, DispatchType


class GatewayEvent(BaseModel):
    model_config = ConfigDict(frozen=True)


class Dispatch(GatewayEvent):
    """op 0 — an application event."""
    sequence: Optional[int] = None
    # Dumped as the concrete variant, not the empty base.
    event: SerializeAsAny[DispatchEvent]

    @property
    def event_type(self) -> DispatchType:
        return self.event.event_type


class HeartbeatRequest(GatewayEvent):
    """op 1 — the server wants a heartbeat now."""


class Reconnect(GatewayEvent):
    """op 7"""


class InvalidSession(GatewayEvent):
    """op 9"""
    resumable: bool


class Hello(GatewayEvent):
    """op 10"""
    heartbeat_interval: int


class HeartbeatAck(GatewayEvent):
    """op 11"""


AnyGatewayEvent = Union[Dispatch, HeartbeatRequest, Reconnect, InvalidSession, Hello, HeartbeatAck]


_CONTROL_OPCODES = frozenset({
    Opcode.HEARTBEAT, Opcode.RECONNECT, Opcode.INVALID_SESSION, Opcode.HELLO, Opcode.HEARTBEAT_ACK,
})


class _HelloData(BaseModel):
    heartbeat_interval: StrictInt = Field(gt=0)


def resolve_event(payload: Payload) -> AnyGatewayEvent:
    """Classify ``payload`` by opcode and decode its body."""
    op = payload.op

    if op == Opcode.DISPATCH:
        return _resolve_dispatch(payload)

    if op not in _CONTROL_OPCODES:
        raise UnexpectedOpcodeError(op)

    if payload.t is not None:
        raise PayloadFormatError("t", f"Opcode {op} frame must not carry an event type (got {payload.t!r})")

    if op == Opcode.HEARTBEAT:
        return HeartbeatRequest()

    if op == Opcode.RECONNECT:
        return Reconnect()

    if op == Opcode.INVALID_SESSION:
        if payload.d is None:
            raise PayloadFormatError("d", "INVALID_SESSION frame is missing d")
        # Exactly a bool; 0/1 are not accepted.
        if not isinstance(payload.d, bool):
            raise PayloadFormatError("d", f"INVALID_SESSION d must be a boolean, got {type(payload.d).__name__}")
        return InvalidSession(resumable=payload.d)

    if op == Opcode.HELLO:
        if payload.d is None:
            raise PayloadFormatError("d", "HELLO frame is missing d")
        if not isinstance(payload.d, Mapping):
            raise PayloadFormatError("d", f"HELLO d must be an object, got {type(payload.d).__name__}")
        try:
            hello = _HelloData.model_validate(payload.d)
        except ValidationError as e:
            raise PayloadFormatError(
                "d.heartbeat_interval", "HELLO d must carry a positive heartbeat_interval",
                details=e.errors(include_url=False),
            ) from e
        return Hello(heartbeat_interval=hello.heartbeat_interval)

    # HEARTBEAT_ACK
    return HeartbeatAck()


def _resolve_dispatch(payload: Payload) -> Dispatch:
    if payload.d is None:
        raise PayloadFormatError("d", "DISPATCH frame is missing d")
    if payload.t is None:
        raise PayloadFormatError("t", "DISPATCH frame is missing t")
    return Dispatch(sequence=payload.s, event=parse_dispatch(payload.t, payload.d))


def decode_frame(raw: Union[Mapping[str, Any], str, bytes]) -> AnyGatewayEvent:
    """Envelope parsing and resolution in one step."""
    if isinstance(raw, (str, bytes)):
        payload = Payload.from_json(raw)
    else:
        payload = Payload.from_raw(raw)
    return resolve_event(payload)

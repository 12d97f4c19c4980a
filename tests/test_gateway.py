"""Opcode resolution: envelope → control signal or dispatch."""

import json

import pytest

from pandacord import (
    Dispatch,
    HeartbeatAck,
    HeartbeatRequest,
    Hello,
    InvalidSession,
    Payload,
    PayloadFormatError,
    Reconnect,
    UnexpectedOpcodeError,
    UnrecognizedDispatchError,
    decode_frame,
    resolve_event,
)
from pandacord.models.events import MessageCreate


class TestEnvelope:
    def test_from_raw(self):
        payload = Payload.from_raw({"op": 0, "s": 3, "t": "RESUMED", "d": {}})
        assert payload.op == 0
        assert payload.s == 3
        assert payload.t == "RESUMED"
        assert payload.d == {}

    def test_from_json(self):
        payload = Payload.from_json('{"op": 11, "d": null, "s": null, "t": null}')
        assert payload.op == 11
        assert payload.d is None

    @pytest.mark.parametrize("raw,field", [
        ({"op": "0"}, "op"),
        ({"d": {}}, "op"),
        ({"op": 0, "s": "1"}, "s"),
        ({"op": 0, "t": 5}, "t"),
    ])
    def test_bad_envelope_names_field(self, raw, field):
        with pytest.raises(PayloadFormatError) as exc:
            Payload.from_raw(raw)
        assert exc.value.field == field

    def test_invalid_json(self):
        with pytest.raises(PayloadFormatError):
            Payload.from_json("{not json")


class TestControlOpcodes:
    def test_heartbeat_request(self):
        assert decode_frame({"op": 1, "d": None}) == HeartbeatRequest()

    def test_reconnect(self):
        assert decode_frame({"op": 7}) == Reconnect()

    def test_heartbeat_ack(self):
        assert decode_frame({"op": 11}) == HeartbeatAck()

    @pytest.mark.parametrize("value", [True, False])
    def test_invalid_session(self, value):
        event = decode_frame({"op": 9, "d": value})
        assert event == InvalidSession(resumable=value)

    @pytest.mark.parametrize("d", ["x", 1, 0, {"resumable": True}, [True]])
    def test_invalid_session_requires_bool(self, d):
        with pytest.raises(PayloadFormatError) as exc:
            decode_frame({"op": 9, "d": d})
        assert exc.value.field == "d"

    def test_invalid_session_missing_d(self):
        with pytest.raises(PayloadFormatError) as exc:
            decode_frame({"op": 9})
        assert exc.value.field == "d"

    def test_hello(self):
        event = decode_frame({"op": 10, "d": {"heartbeat_interval": 41250, "_trace": ["gw"]}})
        assert isinstance(event, Hello)
        assert event.heartbeat_interval == 41250

    @pytest.mark.parametrize("d", [
        {},
        {"heartbeat_interval": 0},
        {"heartbeat_interval": -5},
        {"heartbeat_interval": "41250"},
        {"heartbeat_interval": True},
    ])
    def test_hello_malformed(self, d):
        with pytest.raises(PayloadFormatError) as exc:
            decode_frame({"op": 10, "d": d})
        assert exc.value.field == "d.heartbeat_interval"

    @pytest.mark.parametrize("d", ["hello", [41250], 41250, False])
    def test_hello_body_not_an_object(self, d):
        with pytest.raises(PayloadFormatError) as exc:
            decode_frame({"op": 10, "d": d})
        assert exc.value.field == "d"

    def test_hello_missing_d(self):
        with pytest.raises(PayloadFormatError) as exc:
            decode_frame({"op": 10})
        assert exc.value.field == "d"

    def test_control_frame_with_event_type_is_rejected(self):
        with pytest.raises(PayloadFormatError) as exc:
            decode_frame({"op": 11, "t": "READY"})
        assert exc.value.field == "t"


class TestUnexpectedOpcode:
    @pytest.mark.parametrize("op", [-1, 2, 3, 4, 5, 6, 8, 12, 99])
    @pytest.mark.parametrize("extra", [{}, {"d": True}, {"d": {"heartbeat_interval": 1}}, {"t": "READY", "d": {}}])
    def test_any_shape(self, op, extra):
        with pytest.raises(UnexpectedOpcodeError) as exc:
            decode_frame({"op": op, **extra})
        assert exc.value.opcode == op


class TestDispatchFrames:
    def test_message_create(self, message_frame):
        event = decode_frame(message_frame)
        assert isinstance(event, Dispatch)
        assert event.sequence == 42
        assert event.event_type == "MESSAGE_CREATE"
        assert isinstance(event.event, MessageCreate)
        assert event.event.message.content == "Supa Hot"

    def test_missing_t(self, message_frame):
        del message_frame["t"]
        with pytest.raises(PayloadFormatError) as exc:
            decode_frame(message_frame)
        assert exc.value.field == "t"

    def test_missing_d(self, message_frame):
        del message_frame["d"]
        with pytest.raises(PayloadFormatError) as exc:
            decode_frame(message_frame)
        assert exc.value.field == "d"

    def test_unknown_dispatch_type(self):
        with pytest.raises(UnrecognizedDispatchError) as exc:
            decode_frame({"op": 0, "s": 1, "t": "SOME_FUTURE_EVENT", "d": {}})
        assert exc.value.event_type == "SOME_FUTURE_EVENT"

    def test_idempotent(self, message_frame):
        assert decode_frame(message_frame) == decode_frame(message_frame)

    def test_json_text(self, message_frame):
        text = json.dumps(message_frame)
        assert decode_frame(text) == decode_frame(message_frame)
        assert decode_frame(text.encode()) == decode_frame(message_frame)

    def test_resolve_event_does_not_touch_payload(self, message_frame):
        payload = Payload.from_raw(message_frame)
        resolve_event(payload)
        assert payload.d == message_frame["d"]

    def test_dump_keeps_event_fields(self, message_frame):
        event = decode_frame(message_frame)
        dumped = event.model_dump(mode="json")
        assert dumped["sequence"] == 42
        assert dumped["event"]["message"]["id"] == message_frame["d"]["id"]
        assert dumped["event"]["message"]["author"]["username"] == message_frame["d"]["author"]["username"]
        assert json.loads(event.model_dump_json())["event"] == dumped["event"]

    def test_dump_decodes_back_to_the_same_event(self, message_frame):
        event = decode_frame(message_frame)
        dumped = event.model_dump(mode="json")
        again = decode_frame({"op": 0, "s": dumped["sequence"], "t": "MESSAGE_CREATE",
                              "d": dumped["event"]["message"]})
        assert again == event

"""
pandacord error types.

Decode failures (format, unrecognized dispatch, unexpected opcode) and REST
collaborator failures share one base so callers can catch broadly or narrowly.
"""

from typing import Any, Optional


class PandaError(Exception):
    def __init__(self, code: str, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.code = code
        self.details = details


class PayloadFormatError(PandaError):
    """A frame or payload is structurally invalid for its declared kind.

    ``field`` names the offending envelope field (``"d"``, ``"t"``, ...) or,
    for dispatch payloads, the dispatch tag (``"MESSAGE_CREATE"``).
    """

    def __init__(self, field: str, message: Optional[str] = None, details: Optional[Any] = None):
        super().__init__("invalid_payload_format", message or f"Invalid payload format: {field}", details)
        self.field = field


class UnrecognizedDispatchError(PandaError):
    def __init__(self, event_type: str):
        super().__init__("unrecognized_dispatch", f"Unrecognized dispatch type: {event_type!r}")
        self.event_type = event_type


class UnexpectedOpcodeError(PandaError):
    def __init__(self, opcode: int):
        super().__init__("unexpected_opcode", f"Unexpected opcode received: {opcode}")
        self.opcode = opcode


class HttpError(PandaError):
    def __init__(self, status_code: int, message: str):
        super().__init__("http_error", f"HTTP {status_code}: {message}")
        self.status_code = status_code

"""
Shared model configuration.

Decoded values are immutable: an edit arrives as a new event, never as a
mutation of something application code already holds.
"""

from typing import Any

from pydantic import BaseModel, BeforeValidator, ConfigDict


class Entity(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


def _int_code(value: Any) -> Any:
    # bool is an int subclass; true is not a channel type.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"expected an integer, got {type(value).__name__}")
    return value


def _str_code(value: Any) -> Any:
    if not isinstance(value, str):
        raise ValueError(f"expected a string, got {type(value).__name__}")
    return value


# Enum fields look values up leniently; these run first so "7", 7.0 and true
# never reach the lookup.
IntCode = BeforeValidator(_int_code)
StrCode = BeforeValidator(_str_code)

import copy

import pytest

from payloads import MESSAGE


@pytest.fixture
def message_body():
    return copy.deepcopy(MESSAGE)


@pytest.fixture
def message_frame():
    return {"op": 0, "s": 42, "t": "MESSAGE_CREATE", "d": copy.deepcopy(MESSAGE)}

from __future__ import annotations

from typing import Any

import pytest

from tgobjects.config import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def message_payload() -> dict[str, Any]:
    return {
        "message_id": 101,
        "from": {"id": 7, "is_bot": False, "first_name": "Ann"},
        "chat": {"id": 42, "type": "private", "first_name": "Ann"},
        "date": 1700000000,
        "text": "/start now",
        "entities": [
            {"type": "bot_command", "offset": 0, "length": 6},
            {"type": "bold", "offset": 7, "length": 3},
        ],
    }

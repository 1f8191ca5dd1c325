"""Pytest configuration and shared fixtures."""
import asyncio
from collections.abc import Sequence
from typing import Any

import pytest

from soudan.chat import ChatEndpoint, ConversationController, Turn


class FakeEndpoint(ChatEndpoint):
    """In-process endpoint that records requests.

    Answers with ``response`` or raises ``error``. When ``gate`` is set,
    each send waits for it, which keeps the exchange pending.
    """

    def __init__(
        self,
        response: Any = None,
        error: Exception | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self.response = response if response is not None else {"content": [{"text": "いいっすね"}]}
        self.error = error
        self.gate = gate
        self.requests: list[list[Turn]] = []
        self.closed = False

    async def send(self, messages: Sequence[Turn]) -> Any:
        self.requests.append(list(messages))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.response

    async def close(self) -> None:
        self.closed = True


def reply(text: str) -> dict:
    """Success body carrying ``text``."""
    return {"content": [{"type": "text", "text": text}]}


@pytest.fixture
def endpoint():
    """Endpoint answering a fixed reply."""
    return FakeEndpoint(response=reply("いいっすね"))


@pytest.fixture
def controller(endpoint):
    """Controller seeded with the default greeting."""
    return ConversationController(endpoint)


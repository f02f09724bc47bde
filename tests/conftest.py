"""Shared test fixtures for dreamchat."""

import asyncio
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from dreamchat.routes import get_interpreter
from dreamchat.services import DreamInterpreter
from dreamchat.app import app

FLYING_REPLY = "[0.85, 'flight, freedom', 'a flying dream'] This suggests liberation."


def completion(content):
    """Build an object shaped like an OpenAI chat completion."""
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


@pytest.fixture
def openai_client():
    client = MagicMock()
    client.chat.completions.create.return_value = completion(FLYING_REPLY)
    return client


@pytest.fixture
def interpreter(openai_client):
    return DreamInterpreter(client=openai_client, model="test-model", system_prompt="Interpret dreams.")


@pytest.fixture
def relay_app(interpreter):
    """The FastAPI app wired to a stubbed interpreter."""
    app.dependency_overrides[get_interpreter] = lambda: interpreter
    yield app
    app.dependency_overrides.clear()


class FakeRelay:
    """Records calls and answers with a canned reply or exception.

    With `hold=True` the call blocks until `release()` so tests can observe
    the in-flight state.
    """

    def __init__(self, reply=FLYING_REPLY, error=None, hold=False):
        self.reply = reply
        self.error = error
        self.calls = []
        self._gate = asyncio.Event()
        if not hold:
            self._gate.set()

    def hold(self):
        self._gate.clear()

    def release(self):
        self._gate.set()

    async def complete(self, messages):
        self.calls.append(messages)
        await self._gate.wait()
        if self.error is not None:
            raise self.error
        return self.reply

    async def health(self):
        return {"status": "ok", "model": "fake-model"}

    async def aclose(self):
        self.closed = True


@pytest.fixture
def fake_relay():
    return FakeRelay()


@pytest.fixture
def make_relay():
    return FakeRelay

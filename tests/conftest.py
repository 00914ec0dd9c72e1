"""Fake SDK clients and API errors, so no test touches the network."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest


def anthropic_message(text):
    return SimpleNamespace(content=[SimpleNamespace(type="text", text=text)])


def openai_completion(content, refusal=None):
    message = SimpleNamespace(content=content, refusal=refusal)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def api_error(cls, status, message="request failed"):
    """A real SDK exception instance, as raised for an HTTP error response."""
    request = httpx.Request("POST", "https://api.example.test/v1/chat")
    response = httpx.Response(status, request=request)
    return cls(message, response=response, body=None)


@pytest.fixture
def anthropic_client():
    """Async Anthropic stand-in; set client.messages.create.side_effect/return_value."""
    client = MagicMock()
    client.messages.create = AsyncMock(return_value=anthropic_message("ok"))
    return client


@pytest.fixture
def openai_client():
    """Async OpenAI stand-in; set client.chat.completions.create.side_effect/return_value."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=openai_completion("ok"))
    return client

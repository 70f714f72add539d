"""Shared fixtures for the OpenRouter client test suite."""

import json

import httpx
import pytest

from openrouter_client.auth.strategies import ApiKeyAuth
from openrouter_client.client.client import Client
from openrouter_client.config.settings import get_settings
from openrouter_client.models.chat import CreateChatCompletionRequest
from openrouter_client.models.messages import Message

TEST_BASE_URL = "https://openrouter.test/api/v1"


@pytest.fixture
def auth() -> ApiKeyAuth:
    return ApiKeyAuth("sk-or-test-key")


@pytest.fixture
def chat_request() -> CreateChatCompletionRequest:
    """Standard chat completions request."""
    return CreateChatCompletionRequest.new(
        "openai/gpt-4o",
        [
            Message.system("You are a helpful assistant."),
            Message.user("Hello, how are you?"),
        ],
    )


@pytest.fixture
def completion_body() -> dict:
    return {
        "id": "gen-abc123",
        "object": "chat.completion",
        "created": 1717000000,
        "model": "openai/gpt-4o",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": "I'm well, thanks!"},
                "finish_reason": "stop",
            }
        ],
        "usage": {"prompt_tokens": 20, "completion_tokens": 6, "total_tokens": 26},
    }


@pytest.fixture
def catalog_body() -> dict:
    return {
        "data": [
            {
                "id": "openai/gpt-4o",
                "name": "OpenAI: GPT-4o",
                "context_length": 128000,
                "pricing": {"prompt": "0.0000025", "completion": "0.00001"},
            },
            {
                "id": "anthropic/claude-3.5-sonnet",
                "name": "Anthropic: Claude 3.5 Sonnet",
                "context_length": 200000,
                "pricing": {"prompt": "0.000003", "completion": "0.000015"},
                "architecture": {"modality": "text+image->text", "tokenizer": "Claude"},
            },
        ]
    }


class RecordingTransport:
    """MockTransport handler that answers with canned responses and keeps requests."""

    def __init__(self, responses):
        self._responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last_request.content)


@pytest.fixture
def make_client(auth):
    """Factory fixture: build a Client backed by canned httpx responses.

    Usage:
        client, transport = make_client(httpx.Response(200, json={...}))
    """
    def _make(*responses, strategy=None):
        transport = RecordingTransport(responses)
        http = httpx.AsyncClient(transport=httpx.MockTransport(transport))
        client = (
            Client.builder()
            .auth(strategy or auth)
            .base_url(TEST_BASE_URL)
            .http_client(http)
            .build()
        )
        return client, transport

    yield _make


@pytest.fixture
def override_settings(monkeypatch):
    """Factory fixture: set env vars and clear settings cache.

    Usage:
        override_settings(OPENROUTER_API_KEY="sk-or-1", OPENROUTER_LOG_LEVEL="DEBUG")
    """
    def _override(**kwargs):
        for key, value in kwargs.items():
            monkeypatch.setenv(key.upper(), str(value))
        # Clear lru_cache so Settings re-reads env
        get_settings.cache_clear()

    yield _override

    # Always clear cache on teardown so other tests get fresh settings
    get_settings.cache_clear()

"""
Shared fixtures: a fake Gemini upstream built on httpx.MockTransport.
"""
import json
import os

# Settings require an API key; set it before any application import
os.environ.setdefault("GEMINI_API_KEY", "test-api-key")

import httpx
import pytest

from assistant.config.settings import GeminiConfig

TEST_API_KEY = "test-api-key"
TEST_BASE_URL = "https://gemini.test/v1beta"


def _gemini_reply(text: str) -> dict:
    """A realistic generateContent body, extra fields included."""
    return {
        "candidates": [
            {
                "content": {"parts": [{"text": text}], "role": "model"},
                "finishReason": "STOP",
                "index": 0,
                "safetyRatings": [],
            }
        ],
        "usageMetadata": {"promptTokenCount": 3, "candidatesTokenCount": 5, "totalTokenCount": 8},
        "modelVersion": "gemini-2.5-flash",
    }


@pytest.fixture
def gemini_reply():
    return _gemini_reply


@pytest.fixture
def gemini_config() -> GeminiConfig:
    return GeminiConfig(
        api_key=TEST_API_KEY,
        default_model="gemini-2.5-flash",
        base_url=TEST_BASE_URL,
        timeout_seconds=0.5,
    )


@pytest.fixture
def upstream_calls() -> list:
    """Requests received by the fake upstream, in order."""
    return []


@pytest.fixture
def echo_transport(upstream_calls):
    """Fake Gemini that replies with the text it was sent."""

    def handler(request: httpx.Request) -> httpx.Response:
        upstream_calls.append(request)
        body = json.loads(request.content)
        return httpx.Response(200, json=_gemini_reply(body["contents"][0]["parts"][0]["text"]))

    return httpx.MockTransport(handler)


@pytest.fixture
def reply_transport(upstream_calls):
    """Build a fake Gemini that always answers with the given status and JSON body."""

    def _make(status_code: int, body) -> httpx.MockTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            upstream_calls.append(request)
            return httpx.Response(status_code, json=body)

        return httpx.MockTransport(handler)

    return _make

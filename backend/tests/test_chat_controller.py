"""
Tests for the chat controller pipeline: model selection, Gemini call, response assembly.
"""
from datetime import datetime, timezone

import pytest

from assistant.api.models.chat import ChatRequest
from assistant.controllers.chat_controller import ChatController
from assistant.services.gemini.client import GeminiClient
from assistant.services.gemini.exceptions import UpstreamHttpError


@pytest.mark.asyncio
async def test_chat_returns_gemini_reply(gemini_config, reply_transport, gemini_reply):
    client = GeminiClient(gemini_config, transport=reply_transport(200, gemini_reply("Hi there")))
    controller = ChatController(gemini_config, client)

    before = datetime.now(timezone.utc)
    result = await controller.chat(ChatRequest(message="Hello", model="gemini-2.5-flash"))
    after = datetime.now(timezone.utc)

    assert result.response == "Hi there"
    assert result.model == "gemini-2.5-flash"
    assert result.success is True
    assert before <= result.timestamp <= after


@pytest.mark.asyncio
async def test_echoed_message_round_trips(gemini_config, echo_transport):
    controller = ChatController(gemini_config, GeminiClient(gemini_config, transport=echo_transport))
    message = "Multi-line\nmessage with unicode: héllo wörld 👋"

    result = await controller.chat(ChatRequest(message=message))

    assert result.response == message


@pytest.mark.asyncio
async def test_unknown_model_uses_default_downstream(gemini_config, echo_transport, upstream_calls):
    controller = ChatController(gemini_config, GeminiClient(gemini_config, transport=echo_transport))

    result = await controller.chat(ChatRequest(message="Hello", model="not-a-model"))

    assert result.model == "gemini-2.5-flash"
    assert upstream_calls[0].url.path.endswith("/models/gemini-2.5-flash:generateContent")
    assert "not-a-model" not in str(upstream_calls[0].url)


@pytest.mark.asyncio
async def test_model_casing_is_normalized(gemini_config, echo_transport, upstream_calls):
    controller = ChatController(gemini_config, GeminiClient(gemini_config, transport=echo_transport))

    result = await controller.chat(ChatRequest(message="Hello", model="GEMINI-1.5-PRO"))

    assert result.model == "gemini-1.5-pro"
    assert upstream_calls[0].url.path.endswith("/models/gemini-1.5-pro:generateContent")


@pytest.mark.asyncio
async def test_new_gemini_model_passes_through(gemini_config, echo_transport, upstream_calls):
    controller = ChatController(gemini_config, GeminiClient(gemini_config, transport=echo_transport))

    result = await controller.chat(ChatRequest(message="Hello", model="gemini-3.0-pro-preview"))

    assert result.model == "gemini-3.0-pro-preview"
    assert upstream_calls[0].url.path.endswith("/models/gemini-3.0-pro-preview:generateContent")


@pytest.mark.asyncio
async def test_upstream_failure_propagates_unchanged(gemini_config, reply_transport):
    transport = reply_transport(429, {"error": {"code": 429, "status": "RESOURCE_EXHAUSTED"}})
    controller = ChatController(gemini_config, GeminiClient(gemini_config, transport=transport))

    with pytest.raises(UpstreamHttpError) as exc_info:
        await controller.chat(ChatRequest(message="Hello"))

    assert exc_info.value.status_code == 429

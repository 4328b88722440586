"""
Tests for building Gemini request bodies and reading Gemini responses.
"""
import pytest

from assistant.services.gemini.exceptions import EmptyUpstreamResponse, MalformedUpstreamResponse
from assistant.services.gemini.payloads import (
    GeminiResponse,
    build_request_body,
    extract_response_text,
)


def test_build_request_body_nests_message():
    body = build_request_body("Hello")

    assert body.model_dump() == {"contents": [{"parts": [{"text": "Hello"}]}]}


def test_extract_ignores_unknown_fields(gemini_reply):
    response = GeminiResponse.model_validate(gemini_reply("Hi there"))

    assert extract_response_text(response) == "Hi there"


def test_extract_uses_first_candidate_and_first_part():
    response = GeminiResponse.model_validate(
        {
            "candidates": [
                {"content": {"parts": [{"text": "first"}, {"text": "second"}]}},
                {"content": {"parts": [{"text": "other candidate"}]}},
            ]
        }
    )

    assert extract_response_text(response) == "first"


@pytest.mark.parametrize("document", [{}, {"candidates": None}, {"candidates": []}])
def test_extract_without_candidates_is_empty(document):
    with pytest.raises(EmptyUpstreamResponse):
        extract_response_text(GeminiResponse.model_validate(document))


def test_extract_none_is_empty():
    with pytest.raises(EmptyUpstreamResponse):
        extract_response_text(None)


@pytest.mark.parametrize(
    "candidate",
    [
        {},
        {"content": None},
        {"content": {}},
        {"content": {"parts": []}},
        {"content": {"parts": [{"inlineData": {"mimeType": "image/png"}}]}},
    ],
)
def test_extract_without_content_is_malformed(candidate):
    response = GeminiResponse.model_validate({"candidates": [candidate]})

    with pytest.raises(MalformedUpstreamResponse) as exc_info:
        extract_response_text(response)

    assert exc_info.value.status_code == 500


def test_extract_keeps_empty_text():
    response = GeminiResponse.model_validate({"candidates": [{"content": {"parts": [{"text": ""}]}}]})

    assert extract_response_text(response) == ""

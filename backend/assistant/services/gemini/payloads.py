"""
Request and response documents for the Gemini ``generateContent`` endpoint.

Request:  {"contents": [{"parts": [{"text": "message"}]}]}
Response: {"candidates": [{"content": {"parts": [{"text": "reply"}]}}]}

Unknown response fields (safety ratings, usage metadata, ...) are ignored.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from .exceptions import EmptyUpstreamResponse, MalformedUpstreamResponse


class GeminiPart(BaseModel):
    text: Optional[str] = None


class GeminiContent(BaseModel):
    parts: List[GeminiPart]


class GeminiRequest(BaseModel):
    """Body sent to Gemini."""

    contents: List[GeminiContent]


class GeminiResponseContent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    parts: Optional[List[GeminiPart]] = None


class GeminiCandidate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: Optional[GeminiResponseContent] = None


class GeminiResponse(BaseModel):
    """Body returned by Gemini."""

    model_config = ConfigDict(extra="ignore")

    candidates: Optional[List[GeminiCandidate]] = None


def build_request_body(message: str) -> GeminiRequest:
    """Wrap a message into a single content item with a single text part."""
    return GeminiRequest(contents=[GeminiContent(parts=[GeminiPart(text=message)])])


def extract_response_text(response: Optional[GeminiResponse]) -> str:
    """
    Pull the reply text out of a Gemini response.

    Only the first part of the first candidate is used.

    Raises:
        EmptyUpstreamResponse: If there are no candidates
        MalformedUpstreamResponse: If the first candidate has no content, no parts
            or no text
    """
    if response is None or not response.candidates:
        raise EmptyUpstreamResponse("Empty response from Google Gemini API")

    candidate = response.candidates[0]
    if candidate.content is None or not candidate.content.parts:
        raise MalformedUpstreamResponse("No content in response from Google Gemini API")

    text = candidate.content.parts[0].text
    if text is None:
        raise MalformedUpstreamResponse("No text in response from Google Gemini API")
    return text

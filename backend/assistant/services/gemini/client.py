"""
Google Gemini API client.

Sends a single non-streaming ``generateContent`` call per chat request:

    POST {base_url}/models/{model}:generateContent?key={api_key}

and classifies every failure into a :class:`GeminiError` subtype.
"""
import asyncio
import logging
from typing import Optional
from urllib.parse import quote, quote_plus

import httpx

from assistant.api.models.chat import ValidatedChatRequest
from assistant.config.settings import GeminiConfig

from .exceptions import GeminiError, UpstreamHttpError, UpstreamTimeout, UpstreamUnknownError
from .payloads import GeminiRequest, GeminiResponse, build_request_body, extract_response_text

logger = logging.getLogger(__name__)


class GeminiClient:
    """Async client for the Gemini ``generateContent`` endpoint."""

    def __init__(
        self,
        config: GeminiConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            config: Immutable Gemini settings (API key, default model, base URL, timeout)
            transport: Optional httpx transport, used by tests to fake the upstream
        """
        self.config = config
        self._transport = transport

    async def chat(self, request: ValidatedChatRequest) -> str:
        """
        Send a chat message to Gemini and return the reply text.

        Args:
            request: Chat request with an already validated model name

        Returns:
            Text of the first part of the first candidate

        Raises:
            UpstreamHttpError: Gemini answered with a non-2xx status
            UpstreamTimeout: No answer within the configured timeout
            EmptyUpstreamResponse / MalformedUpstreamResponse: Unusable response body
            UpstreamUnknownError: Any other failure
        """
        logger.info(f"Sending chat request to Google Gemini with message length: {len(request.message)}")

        # Second, independent defaulting; callers normally pass a resolved model already
        model_name = (
            request.model.strip()
            if request.model and request.model.strip()
            else self.config.default_model
        )
        body = build_request_body(request.message)
        # Model name is encoded as one path segment
        url = f"{self.config.base_url}/models/{quote(model_name, safe='')}:generateContent"

        try:
            text = await asyncio.wait_for(
                self._generate(url, body),
                timeout=self.config.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.error(f"Google Gemini API timed out after {self.config.timeout_seconds}s")
            raise UpstreamTimeout(
                f"Google Gemini API did not respond within {self.config.timeout_seconds:g} seconds"
            )
        except httpx.TimeoutException as e:
            logger.error(f"Google Gemini API timed out: {type(e).__name__}")
            raise UpstreamTimeout(
                f"Google Gemini API did not respond within {self.config.timeout_seconds:g} seconds"
            ) from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.error(
                f"Google Gemini API error - Status: {status_code}, "
                f"Body: {self._redact(e.response.text)}"
            )
            raise UpstreamHttpError(
                f"Failed to communicate with Google Gemini API: {status_code} {e.response.reason_phrase}",
                status_code,
            ) from e
        except GeminiError as e:
            logger.error(f"Error calling Google Gemini API: {e.message}")
            raise
        except Exception as e:
            message = self._redact(f"{type(e).__name__}: {e}")
            logger.error(f"Unexpected error calling Google Gemini API: {message}")
            raise UpstreamUnknownError(f"Unexpected error calling Google Gemini API: {message}", 500) from e

        logger.debug("Successfully received response from Google Gemini")
        return text

    async def _generate(self, url: str, body: GeminiRequest) -> str:
        async with httpx.AsyncClient(
            timeout=self.config.timeout_seconds,
            transport=self._transport,
        ) as client:
            response = await client.post(
                url,
                params={"key": self.config.api_key},
                json=body.model_dump(),
                headers={"Content-Type": "application/json"},
            )
            response.raise_for_status()
            payload = GeminiResponse.model_validate(response.json())
        return extract_response_text(payload)

    def _redact(self, text: str) -> str:
        """Strip the API key from text that may echo the request URL."""
        key = self.config.api_key
        if not key:
            return text
        # Raw form plus the percent-encoded forms httpx may print
        for form in (key, quote(key, safe=""), quote_plus(key)):
            text = text.replace(form, "***REDACTED***")
        return text

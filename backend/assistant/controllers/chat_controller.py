"""
Chat controller.

Resolves the model for a chat request, forwards the message to Google Gemini
and wraps the reply in a ChatResponse.
"""
import logging
from datetime import datetime, timezone

from assistant.api.models.chat import ChatRequest, ChatResponse, ValidatedChatRequest
from assistant.config.settings import GeminiConfig
from assistant.services.gemini import GeminiClient, GeminiError, validate_model

logger = logging.getLogger(__name__)


class ChatController:
    """Controller for chat operations."""

    def __init__(self, config: GeminiConfig, client: GeminiClient):
        """
        Args:
            config: Immutable Gemini settings, used for the default model
            client: Client used to reach the Gemini API
        """
        self.config = config
        self.client = client

    async def chat(self, request: ChatRequest) -> ChatResponse:
        """
        Process a chat request and return the AI response.

        Unknown model names fall back to the configured default instead of
        failing the request. Gemini failures are logged and re-raised as is.

        Args:
            request: ChatRequest with message and optional model

        Returns:
            ChatResponse with the reply text and the model actually used

        Raises:
            GeminiError: If the Gemini call fails
        """
        logger.info(f"Processing chat request with message length: {len(request.message)}")

        model_name = validate_model(request.model, self.config.default_model)
        validated = ValidatedChatRequest(message=request.message, model=model_name)

        try:
            reply = await self.client.chat(validated)
        except GeminiError as e:
            logger.error(f"Error processing chat request: {e.message}")
            raise

        logger.info(f"Successfully processed chat request with model: {model_name}")
        return ChatResponse(
            response=reply,
            model=model_name,
            timestamp=datetime.now(timezone.utc),
            success=True,
        )

"""
Chat endpoints.

Forwards a single message to Google Gemini and returns the reply.
"""
import logging

from fastapi import APIRouter, Depends, status

from assistant.api.models import ChatRequest, ChatResponse, ErrorResponse
from assistant.config.settings import Settings, get_settings
from assistant.controllers.chat_controller import ChatController
from assistant.services.gemini import GeminiClient

logger = logging.getLogger(__name__)

# ============================================================================
# Dependency Injection
# ============================================================================


def get_chat_controller(settings: Settings = Depends(get_settings)) -> ChatController:
    """Dependency injection for ChatController."""
    config = settings.gemini_config()
    return ChatController(config=config, client=GeminiClient(config))


# ============================================================================
# Router
# ============================================================================

router = APIRouter()


# ============================================================================
# Endpoints
# ============================================================================


@router.post(
    "/chat",
    status_code=status.HTTP_200_OK,
    response_model=ChatResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "AI service or internal error"},
    },
)
async def chat(
    request: ChatRequest,
    controller: ChatController = Depends(get_chat_controller),
) -> ChatResponse:
    """
    Send a message to the AI model and get its response.

    - message is required (1-10000 characters, not blank)
    - model is optional and defaults to the configured Gemini model
    - unknown model names are replaced with the default rather than rejected

    Gemini failures propagate to the error handling middleware, which
    answers with a 500 ErrorResponse.
    """
    logger.info(f"Received chat request - Model: {request.model}, Message length: {len(request.message)}")
    return await controller.chat(request)

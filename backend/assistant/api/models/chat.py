"""
Request and response models for the chat endpoint.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

MAX_MESSAGE_LENGTH = 10000
MAX_MODEL_LENGTH = 50


class ChatRequest(BaseModel):
    """Payload for a chat message.

    - message: Prompt sent to the AI model, 1 to 10000 characters, not blank
    - model: Optional Gemini model name (defaults to the configured model)
    """
    message: str = Field(
        ...,
        description="The message/prompt to send to the AI model",
        min_length=1,
        max_length=MAX_MESSAGE_LENGTH,
        examples=["Explain quantum computing in one paragraph"],
    )
    model: Optional[str] = Field(
        None,
        description="Gemini model to use, e.g. gemini-2.5-flash",
        max_length=MAX_MODEL_LENGTH,
        examples=["gemini-2.5-flash", "gemini-1.5-pro"],
    )

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Message cannot be blank")
        return value


class ValidatedChatRequest(BaseModel):
    """Chat request whose model has already been resolved to a usable name."""
    message: str
    model: str = Field(..., min_length=1)


class ChatResponse(BaseModel):
    """Response model for a chat message.

    Always carries success=True; failures are returned as ErrorResponse.
    """
    response: str = Field(..., description="The AI-generated response text")
    model: str = Field(..., description="The model that generated the response")
    timestamp: datetime = Field(..., description="When the response was assembled")
    success: bool = Field(True, description="Whether the request succeeded")

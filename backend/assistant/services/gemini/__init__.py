from .ai_models import AiModel, resolve_model, validate_model
from .client import GeminiClient
from .exceptions import (
    EmptyUpstreamResponse,
    GeminiError,
    MalformedUpstreamResponse,
    UpstreamHttpError,
    UpstreamTimeout,
    UpstreamUnknownError,
)

__all__ = [
    "AiModel",
    "resolve_model",
    "validate_model",
    "GeminiClient",
    "GeminiError",
    "UpstreamHttpError",
    "UpstreamTimeout",
    "EmptyUpstreamResponse",
    "MalformedUpstreamResponse",
    "UpstreamUnknownError",
]

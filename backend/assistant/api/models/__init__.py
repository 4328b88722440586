from .chat import ChatRequest, ChatResponse, ValidatedChatRequest
from .error import ErrorResponse

__all__ = [
    "ErrorResponse",
    "ChatRequest",
    "ChatResponse",
    "ValidatedChatRequest",
]

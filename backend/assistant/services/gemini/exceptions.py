"""
Exceptions raised while talking to the Google Gemini API.

Every failure on the send path is surfaced as one of these. ``status_code``
carries the upstream HTTP status when there is one and 500 otherwise; the
error handling middleware still answers clients with a 500.
"""


class GeminiError(Exception):
    """Base class for Gemini API failures."""

    error = "AI Service Error"

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UpstreamHttpError(GeminiError):
    """Gemini answered with a non-2xx status."""


class UpstreamTimeout(GeminiError):
    """No answer from Gemini within the request timeout."""

    error = "AI Service Timeout"


class EmptyUpstreamResponse(GeminiError):
    """Gemini returned no candidates."""

    error = "Invalid AI Response"


class MalformedUpstreamResponse(GeminiError):
    """The first candidate has no usable content."""

    error = "Invalid AI Response"


class UpstreamUnknownError(GeminiError):
    """Network, decoding or any other unexpected failure."""

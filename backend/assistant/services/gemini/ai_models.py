"""
Known Gemini models and request-time model selection.

Requests may name one of the known models in any casing, or any other
``gemini-`` model so that new upstream releases work without a code change.
Anything else silently falls back to the configured default.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

logger = logging.getLogger(__name__)

GEMINI_MODEL_PREFIX = "gemini-"


class AiModel(str, Enum):
    """Gemini models this service recognizes by name."""

    GEMINI_2_5_FLASH = "gemini-2.5-flash"
    GEMINI_2_0_FLASH = "gemini-2.0-flash"
    GEMINI_1_5_PRO = "gemini-1.5-pro"
    GEMINI_1_5_FLASH = "gemini-1.5-flash"

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["AiModel"]:
        """Case-insensitive lookup, None when the name is unknown."""
        if name is None:
            return None
        lowered = name.lower()
        for model in cls:
            if model.value == lowered:
                return model
        return None


@dataclass(frozen=True)
class KnownModel:
    model: AiModel

    @property
    def api_name(self) -> str:
        return self.model.value


@dataclass(frozen=True)
class PassthroughModel:
    """A ``gemini-`` model that is not in :class:`AiModel` yet."""

    name: str

    @property
    def api_name(self) -> str:
        return self.name


@dataclass(frozen=True)
class DefaultModel:
    name: str

    @property
    def api_name(self) -> str:
        return self.name


ModelChoice = Union[KnownModel, PassthroughModel, DefaultModel]


def resolve_model(requested: Optional[str], default: str) -> ModelChoice:
    """
    Decide which model a request should use.

    Args:
        requested: Model name from the request, may be None
        default: Configured default model name

    Returns:
        KnownModel, PassthroughModel or DefaultModel. Never raises.
    """
    if requested is None or not requested.strip():
        logger.debug(f"No model specified, using default: {default}")
        return DefaultModel(default)

    trimmed = requested.strip()

    known = AiModel.from_name(trimmed)
    if known is not None:
        logger.debug(f"Using requested Gemini model: {known.value}")
        return KnownModel(known)

    if trimmed.startswith(GEMINI_MODEL_PREFIX):
        logger.debug(f"Using requested Gemini model (not in AiModel): {trimmed}")
        return PassthroughModel(trimmed)

    logger.warning(
        f"Invalid model '{trimmed}' requested. Must be a Gemini model "
        f"(e.g. {AiModel.GEMINI_2_5_FLASH.value}). Using default: {default}"
    )
    return DefaultModel(default)


def validate_model(requested: Optional[str], default: str) -> str:
    """Return the API-facing model name for ``requested``, or ``default``."""
    return resolve_model(requested, default).api_name

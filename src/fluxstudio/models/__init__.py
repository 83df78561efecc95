"""Models package for fluxstudio."""

from fluxstudio.models.catalog import AVAILABLE_MODELS, ModelInfo, get_available_models
from fluxstudio.models.errors import (
    ApiError,
    ErrorCode,
    FluxStudioError,
    IoError,
    ResponseParseError,
    SerializationError,
    TransportError,
)
from fluxstudio.models.gemini import GeminiResponse
from fluxstudio.models.prediction import GenerationResult
from fluxstudio.models.requests import DEFAULT_OUTPUT_FORMAT, AspectRatio, GenerationRequest
from fluxstudio.models.responses import GenerationResponse

__all__ = [
    "AVAILABLE_MODELS",
    "ApiError",
    "AspectRatio",
    "DEFAULT_OUTPUT_FORMAT",
    "ErrorCode",
    "FluxStudioError",
    "GeminiResponse",
    "GenerationRequest",
    "GenerationResponse",
    "GenerationResult",
    "IoError",
    "ModelInfo",
    "ResponseParseError",
    "SerializationError",
    "TransportError",
    "get_available_models",
]

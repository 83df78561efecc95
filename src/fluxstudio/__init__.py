"""fluxstudio - Replicate image generation with local archival."""

from fluxstudio.config import FluxStudioSettings
from fluxstudio.models.catalog import ModelInfo
from fluxstudio.models.errors import (
    ApiError,
    ErrorCode,
    FluxStudioError,
    IoError,
    ResponseParseError,
    SerializationError,
    TransportError,
)
from fluxstudio.models.prediction import GenerationResult
from fluxstudio.models.requests import AspectRatio, GenerationRequest
from fluxstudio.models.responses import GenerationResponse
from fluxstudio.providers.base import PredictionProvider
from fluxstudio.providers.replicate_provider import ReplicateProvider
from fluxstudio.services.archive_service import ArchiveService
from fluxstudio.services.download_service import download_asset
from fluxstudio.services.generation_service import GenerationService
from fluxstudio.services.prompt_service import PromptEnhancementService
from fluxstudio.services.storage_service import StorageContext
from fluxstudio.utils.payload_utils import build_payload

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "FluxStudioSettings",
    "StorageContext",
    # Request/Result types
    "AspectRatio",
    "GenerationRequest",
    "GenerationResult",
    "GenerationResponse",
    "ModelInfo",
    # Errors
    "ErrorCode",
    "FluxStudioError",
    "TransportError",
    "ApiError",
    "ResponseParseError",
    "IoError",
    "SerializationError",
    # Providers
    "PredictionProvider",
    "ReplicateProvider",
    # Services
    "ArchiveService",
    "GenerationService",
    "PromptEnhancementService",
    "download_asset",
    # Utilities
    "build_payload",
]

"""Inbound commands invoked by the desktop shell.

Each command returns a GenerationResponse whose error, when present, is a
plain human-readable string.
"""

import logging

from fluxstudio.config import FluxStudioSettings
from fluxstudio.models.catalog import ModelInfo
from fluxstudio.models.catalog import get_available_models as _catalog_models
from fluxstudio.models.errors import FluxStudioError
from fluxstudio.models.prediction import GenerationResult
from fluxstudio.models.requests import GenerationRequest
from fluxstudio.models.responses import GenerationResponse
from fluxstudio.providers.replicate_provider import ReplicateProvider
from fluxstudio.services.archive_service import ArchiveService
from fluxstudio.services.generation_service import GenerationService
from fluxstudio.services.prompt_service import PromptEnhancementService
from fluxstudio.services.storage_service import StorageContext

logger = logging.getLogger(__name__)


def _provider(api_key: str, settings: FluxStudioSettings) -> ReplicateProvider:
    return ReplicateProvider(
        api_key=api_key,
        model=settings.model,
        base_url=settings.replicate_api_base,
        timeout=settings.request_timeout_seconds,
    )


async def submit_generation(
    api_key: str,
    request: GenerationRequest,
    storage: StorageContext,
    settings: FluxStudioSettings | None = None,
) -> GenerationResponse[GenerationResult]:
    """Run a generation and archive it under the storage context."""
    settings = settings or FluxStudioSettings()
    try:
        service = GenerationService(
            provider=_provider(api_key, settings),
            archive_service=ArchiveService(storage, download_timeout=settings.request_timeout_seconds),
        )
        result = await service.generate(request)
    except (FluxStudioError, ValueError) as e:
        logger.error(f"❌ [commands] Generation failed: {e}")
        return GenerationResponse[GenerationResult].fail(str(e))
    return GenerationResponse[GenerationResult].ok(result)


async def validate_api_key(
    api_key: str,
    settings: FluxStudioSettings | None = None,
) -> GenerationResponse[bool]:
    """Report whether the Replicate API accepts the key."""
    settings = settings or FluxStudioSettings()
    try:
        valid = await _provider(api_key, settings).validate_api_key()
    except (FluxStudioError, ValueError) as e:
        return GenerationResponse[bool].fail(str(e))
    return GenerationResponse[bool].ok(valid)


def get_storage_path(storage: StorageContext) -> GenerationResponse[str]:
    """Absolute path of the generations root, created if absent."""
    try:
        path = storage.ensure_generations_dir()
    except FluxStudioError as e:
        return GenerationResponse[str].fail(str(e))
    return GenerationResponse[str].ok(str(path))


async def enhance_prompt(
    prompt: str,
    settings: FluxStudioSettings | None = None,
) -> GenerationResponse[str]:
    """Rewrite a prompt with more visual detail."""
    settings = settings or FluxStudioSettings()
    try:
        service = PromptEnhancementService(
            model=settings.gemini_model,
            base_url=settings.gemini_api_base,
            timeout=settings.request_timeout_seconds,
        )
        enhanced = await service.enhance(prompt)
    except (FluxStudioError, ValueError) as e:
        return GenerationResponse[str].fail(str(e))
    return GenerationResponse[str].ok(enhanced)


def get_available_models() -> list[ModelInfo]:
    """Models the front end may offer."""
    return _catalog_models()

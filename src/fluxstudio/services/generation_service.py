"""Generation service that orchestrates the provider and local archival."""

import logging
import time

from fluxstudio.models.prediction import GenerationResult
from fluxstudio.models.requests import GenerationRequest
from fluxstudio.providers.base import PredictionProvider
from fluxstudio.services.archive_service import ArchiveService
from fluxstudio.utils.payload_utils import build_payload

logger = logging.getLogger(__name__)


class GenerationService:
    """Runs one prediction and archives it.

    The returned GenerationResult is the only outcome the caller sees.
    Archival problems go to the log and never turn a successful prediction
    into a failure.
    """

    def __init__(self, provider: PredictionProvider, archive_service: ArchiveService):
        """
        Initialize generation service.

        Args:
            provider: Prediction provider used for the API call
            archive_service: Archive service used to persist successful predictions
        """
        self.provider = provider
        self.archive_service = archive_service

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Generate an image and archive the transaction.

        Args:
            request: Generation request

        Returns:
            The prediction as reported by the API

        Raises:
            TransportError, ApiError, ResponseParseError: The prediction call
                failed; nothing is written to disk in that case.
        """
        start_time = time.time()

        payload = build_payload(request)
        result = await self.provider.create_prediction(payload)

        duration_ms = int((time.time() - start_time) * 1000)
        logger.info(f"✅ [GenerationService] Prediction {result.id} returned in {duration_ms}ms")

        try:
            directory = await self.archive_service.archive(result, request)
        except Exception as e:
            logger.error(
                f"❌ [GenerationService] Archiving prediction {result.id} failed: {e}",
                exc_info=True,
            )
        else:
            logger.info(f"📁 [GenerationService] Prediction {result.id} archived to {directory}")

        return result

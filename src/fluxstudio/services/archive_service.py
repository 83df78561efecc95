"""Archive service that persists finished predictions to local storage."""

import asyncio
import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from fluxstudio.models.errors import FluxStudioError, IoError, SerializationError
from fluxstudio.models.prediction import GenerationResult
from fluxstudio.models.requests import GenerationRequest
from fluxstudio.services.download_service import download_asset
from fluxstudio.services.storage_service import StorageContext

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"
RESPONSE_FILENAME = "response.json"
INPUT_FILENAME = "input.json"


def _to_pretty_json(record: BaseModel) -> str:
    try:
        return record.model_dump_json(indent=2)
    except PydanticSerializationError as e:
        raise SerializationError(
            f"Failed to serialize {type(record).__name__}: {e}",
            original_exception=e,
        )


def _make_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IoError(f"Failed to create {path}: {e}", original_exception=e)


def _write_text(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise IoError(f"Failed to write {path}: {e}", original_exception=e)


class ArchiveService:
    """
    Writes one generation to <generations>/<YYYYMMDD_HHMMSS>/.

    The directory holds response.json, input.json and image.<ext>. The JSON
    files are written before the image is fetched, so a failed download
    leaves the metadata in place without the image.

    Two archives finishing in the same second share a directory; the later
    one overwrites the earlier files.
    """

    def __init__(
        self,
        storage: StorageContext,
        clock: Callable[[], datetime] = datetime.now,
        download_timeout: float = 60.0,
    ):
        """
        Initialize archive service.

        Args:
            storage: Storage context owning the generations root
            clock: Returns the local time used to name the directory
            download_timeout: HTTP timeout for the image download
        """
        self.storage = storage
        self._clock = clock
        self.download_timeout = download_timeout

    def directory_for(self, moment: datetime) -> Path:
        return self.storage.generations_dir / moment.strftime(TIMESTAMP_FORMAT)

    async def archive(self, result: GenerationResult, request: GenerationRequest) -> Path:
        """
        Persist a prediction with its originating request.

        Args:
            result: The finished prediction
            request: The request that produced it

        Returns:
            The generation directory

        Raises:
            IoError: A directory or JSON file could not be written
            SerializationError: A record could not be encoded as JSON
        """
        await asyncio.to_thread(self.storage.ensure_generations_dir)

        directory = self.directory_for(self._clock())
        await asyncio.to_thread(_make_dir, directory)

        await asyncio.to_thread(_write_text, directory / RESPONSE_FILENAME, _to_pretty_json(result))
        await asyncio.to_thread(_write_text, directory / INPUT_FILENAME, _to_pretty_json(request))
        logger.info(f"📁 [ArchiveService] Saved prediction {result.id} metadata to {directory}")

        url = result.primary_output
        if url:
            try:
                await download_asset(
                    url,
                    directory,
                    request.file_extension,
                    timeout=self.download_timeout,
                )
            except FluxStudioError as e:
                logger.warning(f"⚠️ [ArchiveService] Image download failed for {result.id}: {e.message}")
        else:
            logger.info(f"[ArchiveService] Prediction {result.id} has no output to download")

        return directory

"""Storage context for the application data directory.

A StorageContext is created once at startup and passed to every component
that writes to disk. Nothing in fluxstudio resolves the data directory on its
own.
"""

import logging
from pathlib import Path

from fluxstudio.config import FluxStudioSettings
from fluxstudio.models.errors import IoError

logger = logging.getLogger(__name__)

GENERATIONS_DIRNAME = "generations"


class StorageContext:
    """Owns the application data root and the generations directory beneath it."""

    def __init__(self, app_data_root: Path | str):
        self.app_data_root = Path(app_data_root).expanduser().resolve()

    @classmethod
    def from_settings(cls, settings: FluxStudioSettings | None = None) -> "StorageContext":
        """Build the context from settings and make sure the generations root exists."""
        settings = settings or FluxStudioSettings()
        context = cls(settings.data_dir)
        context.ensure_generations_dir()
        return context

    @property
    def generations_dir(self) -> Path:
        return self.app_data_root / GENERATIONS_DIRNAME

    def ensure_generations_dir(self) -> Path:
        """
        Create the generations directory if it is missing.

        Returns:
            Absolute path of the generations directory

        Raises:
            IoError: The directory could not be created
        """
        path = self.generations_dir
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise IoError(f"Failed to create {path}: {e}", original_exception=e)
        logger.debug(f"[StorageContext] Generations directory ready at {path}")
        return path

"""Download service for generated image assets."""

import asyncio
import logging
from pathlib import Path

import httpx

from fluxstudio.models.errors import IoError, TransportError

logger = logging.getLogger(__name__)

IMAGE_STEM = "image"


async def download_asset(
    url: str,
    directory: Path,
    extension: str,
    timeout: float = 60.0,
) -> Path:
    """
    Fetch a remote image and write it as image.<extension> inside directory.

    Args:
        url: Asset URL returned in the prediction output
        directory: Existing destination directory
        extension: File extension without the dot (e.g. "jpeg", "png")
        timeout: HTTP timeout in seconds

    Returns:
        Path of the written file

    Raises:
        TransportError: GET failed or returned non-2xx
        IoError: The file could not be written
    """
    destination = Path(directory) / f"{IMAGE_STEM}.{extension}"
    logger.info(f"⬇️ [DownloadService] Downloading {url} to {destination}")

    try:
        async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as client:
            response = await client.get(url)
            response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise TransportError(
            f"Image download returned {e.response.status_code}: {url}",
            original_exception=e,
        )
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise TransportError(f"Image download failed: {e}", original_exception=e)

    try:
        await asyncio.to_thread(destination.write_bytes, response.content)
    except OSError as e:
        raise IoError(f"Failed to write image to {destination}: {e}", original_exception=e)

    logger.info(f"✅ [DownloadService] Saved image to {destination}")
    return destination

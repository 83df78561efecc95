"""Tests for local generation archival."""

import json
from datetime import datetime

import httpx
import pytest
from unittest.mock import AsyncMock, patch

from fluxstudio.models.errors import IoError, TransportError
from fluxstudio.models.prediction import GenerationResult
from fluxstudio.models.requests import GenerationRequest
from fluxstudio.services.archive_service import ArchiveService


def _asset_response(content: bytes = b"image_data") -> httpx.Response:
    return httpx.Response(200, content=content, request=httpx.Request("GET", "https://example.com"))


@pytest.mark.asyncio
async def test_archive_writes_all_files(archive_service, storage, prediction_body, generation_request):
    """Test that response.json, input.json and the image land in a timestamped directory."""
    result = GenerationResult.model_validate(prediction_body)

    with patch("fluxstudio.services.download_service.httpx.AsyncClient") as mock_httpx:
        mock_get = AsyncMock(return_value=_asset_response(b"png_bytes"))
        mock_httpx.return_value.__aenter__.return_value.get = mock_get

        directory = await archive_service.archive(result, generation_request)

    assert directory == storage.generations_dir / "20250115_103009"
    assert json.loads((directory / "response.json").read_text()) == prediction_body
    assert json.loads((directory / "input.json").read_text()) == generation_request.model_dump()
    assert (directory / "image.png").read_bytes() == b"png_bytes"
    mock_get.assert_called_once_with(prediction_body["output"][0])


@pytest.mark.asyncio
async def test_archive_json_is_pretty_printed(archive_service, prediction_body, generation_request):
    """Test that archived JSON is indented."""
    result = GenerationResult.model_validate({**prediction_body, "output": None})

    directory = await archive_service.archive(result, generation_request)

    assert "\n  " in (directory / "response.json").read_text()
    assert "\n  " in (directory / "input.json").read_text()


@pytest.mark.asyncio
async def test_archive_defaults_extension_to_jpeg(archive_service, prediction_body):
    """Test that a request without output_format yields image.jpeg."""
    request = GenerationRequest(prompt="A red dragon", aspect_ratio="1:1")
    result = GenerationResult.model_validate(prediction_body)

    with patch("fluxstudio.services.download_service.httpx.AsyncClient") as mock_httpx:
        mock_httpx.return_value.__aenter__.return_value.get = AsyncMock(return_value=_asset_response())

        directory = await archive_service.archive(result, request)

    assert (directory / "image.jpeg").exists()


@pytest.mark.asyncio
async def test_archive_download_failure_keeps_metadata(archive_service, prediction_body, generation_request):
    """Test that a failed download leaves the JSON files and no image."""
    result = GenerationResult.model_validate(prediction_body)

    with patch("fluxstudio.services.download_service.httpx.AsyncClient") as mock_httpx:
        mock_httpx.return_value.__aenter__.return_value.get = AsyncMock(
            side_effect=httpx.ConnectError("unreachable")
        )

        directory = await archive_service.archive(result, generation_request)

    assert (directory / "response.json").exists()
    assert (directory / "input.json").exists()
    assert not (directory / "image.png").exists()


@pytest.mark.asyncio
async def test_archive_writes_json_before_download(archive_service, prediction_body, generation_request):
    """Test that metadata is already on disk when the download starts."""
    result = GenerationResult.model_validate(prediction_body)
    seen: dict[str, bool] = {}

    async def fake_download(url, directory, extension, timeout):
        seen["response"] = (directory / "response.json").exists()
        seen["input"] = (directory / "input.json").exists()
        raise TransportError("unreachable")

    with patch("fluxstudio.services.archive_service.download_asset", side_effect=fake_download):
        await archive_service.archive(result, generation_request)

    assert seen == {"response": True, "input": True}


@pytest.mark.asyncio
async def test_archive_skips_download_without_output(archive_service, prediction_body, generation_request):
    """Test that empty output means no download attempt."""
    result = GenerationResult.model_validate({**prediction_body, "output": []})

    with patch("fluxstudio.services.archive_service.download_asset", new_callable=AsyncMock) as mock_download:
        directory = await archive_service.archive(result, generation_request)

    mock_download.assert_not_called()
    assert sorted(p.name for p in directory.iterdir()) == ["input.json", "response.json"]


@pytest.mark.asyncio
async def test_archive_same_second_collides(archive_service, prediction_body, generation_request):
    """Test that two archives in the same second share one directory."""
    first = GenerationResult.model_validate({**prediction_body, "id": "first", "output": None})
    second = GenerationResult.model_validate({**prediction_body, "id": "second", "output": None})

    first_dir = await archive_service.archive(first, generation_request)
    second_dir = await archive_service.archive(second, generation_request)

    assert first_dir == second_dir
    assert json.loads((second_dir / "response.json").read_text())["id"] == "second"


@pytest.mark.asyncio
async def test_archive_uses_clock_for_directory_name(storage, prediction_body, generation_request):
    """Test that directory names follow YYYYMMDD_HHMMSS."""
    service = ArchiveService(storage, clock=lambda: datetime(2024, 3, 5, 7, 8, 9))
    result = GenerationResult.model_validate({**prediction_body, "output": None})

    directory = await service.archive(result, generation_request)

    assert directory.name == "20240305_070809"


@pytest.mark.asyncio
async def test_archive_root_creation_failure(tmp_path, prediction_body, generation_request):
    """Test that an unusable storage root raises IoError."""
    blocker = tmp_path / "appdata"
    blocker.write_text("not a directory")

    from fluxstudio.services.storage_service import StorageContext

    service = ArchiveService(StorageContext(blocker))
    result = GenerationResult.model_validate(prediction_body)

    with pytest.raises(IoError):
        await service.archive(result, generation_request)


@pytest.mark.asyncio
async def test_archive_malformed_output_url_keeps_metadata(archive_service, prediction_body, generation_request):
    """Test that an unparseable output URL is logged, not raised."""
    result = GenerationResult.model_validate({**prediction_body, "output": ["https://[::1/x.png"]})

    directory = await archive_service.archive(result, generation_request)

    assert (directory / "response.json").exists()
    assert (directory / "input.json").exists()
    assert not (directory / "image.png").exists()


@pytest.mark.asyncio
async def test_archive_generation_dir_creation_failure(
    archive_service, storage, fixed_now, prediction_body, generation_request
):
    """Test that a file squatting on the timestamp directory raises IoError."""
    storage.ensure_generations_dir()
    (storage.generations_dir / fixed_now.strftime("%Y%m%d_%H%M%S")).write_text("not a directory")
    result = GenerationResult.model_validate({**prediction_body, "output": None})

    with pytest.raises(IoError):
        await archive_service.archive(result, generation_request)


@pytest.mark.asyncio
async def test_archive_response_write_failure(
    archive_service, storage, fixed_now, prediction_body, generation_request
):
    """Test that an unwritable response.json raises IoError before input.json is written."""
    directory = storage.generations_dir / fixed_now.strftime("%Y%m%d_%H%M%S")
    (directory / "response.json").mkdir(parents=True)
    result = GenerationResult.model_validate(prediction_body)

    with patch("fluxstudio.services.archive_service.download_asset", new_callable=AsyncMock) as mock_download:
        with pytest.raises(IoError):
            await archive_service.archive(result, generation_request)

    assert not (directory / "input.json").exists()
    mock_download.assert_not_called()


@pytest.mark.asyncio
async def test_archive_input_write_failure_keeps_response(
    archive_service, storage, fixed_now, prediction_body, generation_request
):
    """Test that an unwritable input.json raises IoError and leaves response.json in place."""
    directory = storage.generations_dir / fixed_now.strftime("%Y%m%d_%H%M%S")
    (directory / "input.json").mkdir(parents=True)
    result = GenerationResult.model_validate(prediction_body)

    with patch("fluxstudio.services.archive_service.download_asset", new_callable=AsyncMock) as mock_download:
        with pytest.raises(IoError):
            await archive_service.archive(result, generation_request)

    assert json.loads((directory / "response.json").read_text()) == prediction_body
    mock_download.assert_not_called()

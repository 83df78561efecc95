"""Shared pytest fixtures for fluxstudio tests."""

from datetime import datetime

import pytest

from fluxstudio.models.errors import ApiError
from fluxstudio.models.prediction import GenerationResult
from fluxstudio.models.requests import GenerationRequest
from fluxstudio.services.archive_service import ArchiveService
from fluxstudio.services.storage_service import StorageContext

PREDICTION_BODY = {
    "id": "abc123xyz",
    "output": ["https://replicate.delivery/pbxt/abc123/out-0.jpg"],
    "status": "succeeded",
    "error": None,
    "created_at": "2025-01-15T10:30:00.000Z",
    "started_at": "2025-01-15T10:30:01.000Z",
    "completed_at": "2025-01-15T10:30:09.500Z",
}

FIXED_NOW = datetime(2025, 1, 15, 10, 30, 9)


class MockPredictionProvider:
    """Mock prediction provider for testing."""

    def __init__(self, body: dict | None = None, should_fail: bool = False):
        """
        Initialize mock provider.

        Args:
            body: Prediction body to return
            should_fail: If True, provider raises ApiError
        """
        self.body = body or PREDICTION_BODY
        self.should_fail = should_fail
        self.call_count = 0
        self.payloads: list[dict[str, str]] = []

    async def create_prediction(self, payload: dict[str, str]) -> GenerationResult:
        """Mock create_prediction method."""
        self.call_count += 1
        self.payloads.append(payload)

        if self.should_fail:
            raise ApiError('API error: {"detail": "Invalid input"}', status_code=422)

        return GenerationResult.model_validate(self.body)


@pytest.fixture
def prediction_body():
    """Fixture for a successful prediction body."""
    return dict(PREDICTION_BODY)


@pytest.fixture
def generation_request():
    """Fixture for a generation request with a few optional fields set."""
    return GenerationRequest(
        prompt="A red dragon perched on a cliff",
        aspect_ratio="16:9",
        seed=42,
        output_format="png",
    )


@pytest.fixture
def fixed_now():
    """Fixture for the moment used to name archive directories."""
    return FIXED_NOW


@pytest.fixture
def storage(tmp_path):
    """Fixture for a storage context rooted in a temp directory."""
    return StorageContext(tmp_path / "appdata")


@pytest.fixture
def archive_service(storage):
    """Fixture for an archive service with a fixed clock."""
    return ArchiveService(storage, clock=lambda: FIXED_NOW)


@pytest.fixture
def mock_prediction_provider():
    """Fixture for a working mock prediction provider."""
    return MockPredictionProvider()


@pytest.fixture
def failing_prediction_provider():
    """Fixture for a failing mock prediction provider."""
    return MockPredictionProvider(should_fail=True)

"""Replicate prediction provider."""

import logging

import httpx
from pydantic import ValidationError

from fluxstudio.models.errors import ApiError, ResponseParseError, TransportError
from fluxstudio.models.prediction import GenerationResult
from fluxstudio.utils.payload_utils import wrap_input

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.replicate.com/v1"
DEFAULT_MODEL = "black-forest-labs/flux-1.1-pro-ultra"
DEFAULT_TIMEOUT_SECONDS = 60.0
UNREADABLE_BODY = "Unknown error"


def _read_body(response: httpx.Response) -> str:
    try:
        return response.text
    except httpx.ResponseNotRead:
        return UNREADABLE_BODY


class ReplicateProvider:
    """Prediction provider using the Replicate HTTP API in synchronous wait mode."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_API_BASE,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        """
        Initialize Replicate provider.

        Args:
            api_key: Replicate API token supplied by the user
            model: Model identifier as owner/name
            base_url: Replicate API base URL
            timeout: HTTP timeout in seconds
        """
        if not api_key:
            raise ValueError("api_key is required")

        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def predictions_url(self) -> str:
        return f"{self.base_url}/models/{self.model}/predictions"

    @property
    def models_url(self) -> str:
        return f"{self.base_url}/models"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "Prefer": "wait",
        }

    async def create_prediction(self, payload: dict[str, str]) -> GenerationResult:
        """
        Create a prediction and block until the API reports it finished.

        Args:
            payload: Flat prediction input

        Returns:
            GenerationResult decoded from the response body

        Raises:
            TransportError: Connection, timeout or TLS failure
            ApiError: Non-2xx response, carrying the body text
            ResponseParseError: 2xx body that is not a prediction
        """
        logger.info(f"🎨 [ReplicateProvider] Creating prediction with {self.model}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.predictions_url,
                    headers=self._headers(),
                    json=wrap_input(payload),
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"❌ [ReplicateProvider] Request failed: {e}")
            raise TransportError(f"API request failed: {e}", original_exception=e)

        if not response.is_success:
            body = _read_body(response)
            logger.error(f"❌ [ReplicateProvider] API returned {response.status_code}: {body}")
            raise ApiError(f"API error: {body}", status_code=response.status_code, body=body)

        try:
            result = GenerationResult.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"❌ [ReplicateProvider] Unexpected response shape: {e}")
            raise ResponseParseError(f"Failed to parse API response: {e}", original_exception=e)

        logger.info(f"✅ [ReplicateProvider] Prediction {result.id} finished with status {result.status}")
        return result

    async def validate_api_key(self) -> bool:
        """
        Check the API key against the model listing endpoint.

        Returns:
            True when the listing request succeeds (2xx)

        Raises:
            TransportError: Connection, timeout or TLS failure
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    self.models_url,
                    headers={"Authorization": f"Bearer {self.api_key}"},
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"API request failed: {e}", original_exception=e)

        logger.debug(f"[ReplicateProvider] Key validation returned {response.status_code}")
        return response.is_success

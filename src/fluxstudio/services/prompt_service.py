"""Prompt enhancement through the Gemini generateContent API."""

import logging
import os

import httpx
from pydantic import ValidationError

from fluxstudio.models.errors import ApiError, ResponseParseError, TransportError
from fluxstudio.models.gemini import GeminiResponse

logger = logging.getLogger(__name__)

DEFAULT_GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_GEMINI_MODEL = "gemini-pro"

ENHANCE_INSTRUCTION = (
    "Enhance this prompt for AI image generation, adding more details about style, "
    "lighting, composition, and visual elements without changing the core idea: '{prompt}'"
)


class PromptEnhancementService:
    """Rewrites a short image prompt into a more detailed one."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str = DEFAULT_GEMINI_MODEL,
        base_url: str = DEFAULT_GEMINI_API_BASE,
        timeout: float = 60.0,
    ):
        """
        Initialize prompt enhancement service.

        Args:
            api_key: Gemini API key (defaults to GEMINI_API_KEY environment variable)
            model: Gemini model name
            base_url: Gemini API base URL
            timeout: HTTP timeout in seconds
        """
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not self.api_key:
            raise ValueError("GEMINI_API_KEY environment variable or api_key parameter is required")

        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    async def enhance(self, prompt: str) -> str:
        """
        Ask Gemini for a richer version of the prompt.

        Args:
            prompt: The user's prompt

        Returns:
            The enhanced prompt text

        Raises:
            TransportError: Connection, timeout or TLS failure
            ApiError: Non-2xx response
            ResponseParseError: Response has no candidate text
        """
        body = {
            "contents": [
                {"parts": [{"text": ENHANCE_INSTRUCTION.format(prompt=prompt)}]},
            ]
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    self.endpoint,
                    params={"key": self.api_key},
                    json=body,
                )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"Prompt enhancement request failed: {e}", original_exception=e)

        if not response.is_success:
            logger.error(f"❌ [PromptService] Gemini returned {response.status_code}")
            raise ApiError(
                f"Prompt enhancement error: {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            parsed = GeminiResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.error(f"❌ [PromptService] Unexpected Gemini response shape: {e}")
            raise ResponseParseError(f"Failed to parse response: {e}", original_exception=e)

        logger.info("✅ [PromptService] Prompt enhanced")
        return parsed.first_text

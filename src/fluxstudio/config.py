"""Configuration management for fluxstudio.

Values are loaded from environment variables with the FLUXSTUDIO_ prefix,
then from a .env file in the working directory, then from the defaults below.

Example .env file:
    FLUXSTUDIO_MODEL=black-forest-labs/flux-1.1-pro-ultra
    FLUXSTUDIO_DATA_DIR=~/.fluxstudio
    FLUXSTUDIO_REQUEST_TIMEOUT_SECONDS=60

API keys are not part of the settings: the Replicate key is supplied by the
user at runtime and the Gemini key is read from GEMINI_API_KEY.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FluxStudioSettings(BaseSettings):
    """Runtime configuration for the generation pipeline."""

    model_config = SettingsConfigDict(
        env_prefix="FLUXSTUDIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    replicate_api_base: str = Field(
        default="https://api.replicate.com/v1",
        description="Base URL of the Replicate HTTP API",
    )
    model: str = Field(
        default="black-forest-labs/flux-1.1-pro-ultra",
        description="Replicate model (owner/name) used for predictions",
    )
    data_dir: Path = Field(
        default=Path.home() / ".fluxstudio",
        description="Application data root; generations are stored beneath it",
    )
    request_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="HTTP timeout; covers the upstream synchronous wait window",
    )
    gemini_api_base: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Base URL of the Gemini API used for prompt enhancement",
    )
    gemini_model: str = Field(
        default="gemini-pro",
        description="Gemini model used for prompt enhancement",
    )

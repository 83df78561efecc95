"""Request models for fluxstudio."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_OUTPUT_FORMAT = "jpeg"


class AspectRatio(str, Enum):
    """Aspect ratios accepted by the Flux prediction models."""

    ULTRA_WIDE = "21:9"
    WIDE = "16:9"
    LANDSCAPE_3_2 = "3:2"
    LANDSCAPE_4_3 = "4:3"
    LANDSCAPE_5_4 = "5:4"
    SQUARE = "1:1"
    PORTRAIT_4_5 = "4:5"
    PORTRAIT_3_4 = "3:4"
    PORTRAIT_2_3 = "2:3"
    TALL = "9:16"
    ULTRA_TALL = "9:21"
    CUSTOM = "custom"


class GenerationRequest(BaseModel):
    """Request model for a single image generation."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    prompt: str = Field(..., min_length=1, description="Text prompt for image generation")
    aspect_ratio: AspectRatio = Field(..., description="Aspect ratio for the generated image")
    image_prompt: Optional[str] = Field(
        None,
        description="Image URL to guide composition. An empty string is treated as absent.",
    )
    image_prompt_strength: Optional[float] = Field(
        None, description="Blend between the prompt and the image prompt"
    )
    safety_tolerance: Optional[int] = Field(
        None, description="Safety tolerance, 1 is most strict and 6 is most permissive"
    )
    seed: Optional[int] = Field(None, description="Random seed for reproducible generation")
    raw: Optional[bool] = Field(None, description="Generate less processed, more natural-looking images")
    output_format: Optional[str] = Field(
        None,
        description="Format of the output image. When absent the remote default is used.",
    )

    @property
    def file_extension(self) -> str:
        """Extension used for the downloaded image; falls back to jpeg."""
        return self.output_format or DEFAULT_OUTPUT_FORMAT

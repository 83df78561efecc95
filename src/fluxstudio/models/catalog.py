"""Static catalog of image models offered to the desktop front end."""

from pydantic import BaseModel, ConfigDict, Field


class ModelInfo(BaseModel):
    """Display information for one prediction model."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Replicate model identifier (owner/name)")
    name: str = Field(..., description="Display name")
    description: str = Field(..., description="Short description")


AVAILABLE_MODELS: tuple[ModelInfo, ...] = (
    ModelInfo(
        id="black-forest-labs/flux-1.1-pro-ultra",
        name="Flux 1.1 Pro Ultra",
        description="High-quality professional image generation model",
    ),
    ModelInfo(
        id="black-forest-labs/flux-1.1-pro",
        name="Flux 1.1 Pro",
        description="Faster, better Flux Pro text-to-image model",
    ),
    ModelInfo(
        id="black-forest-labs/flux-dev",
        name="Flux Dev",
        description="Experimental version of Flux with additional features",
    ),
    ModelInfo(
        id="black-forest-labs/flux-schnell",
        name="Flux Schnell",
        description="Fastest Flux model, suited to local development",
    ),
    ModelInfo(
        id="stability-ai/sdxl",
        name="Stable Diffusion XL",
        description="Stability AI's SDXL text-to-image model",
    ),
    ModelInfo(
        id="nvidia/sana",
        name="NVIDIA Sana",
        description="High-quality text-to-image model from NVIDIA",
    ),
)


def get_available_models() -> list[ModelInfo]:
    """Return the models the front end may offer."""
    return list(AVAILABLE_MODELS)

"""Request payload construction for the prediction API.

The prediction endpoint expects a flat string-to-string mapping:
1. prompt and aspect_ratio are always sent verbatim
2. Optional fields are omitted entirely when absent, never sent as null
3. An empty image_prompt is treated as absent
4. Numbers and booleans are sent as their string form

output_format is only sent when the caller set it. The local "jpeg" default
is applied later, when naming the downloaded file.
"""

import logging
from typing import Any

from fluxstudio.models.requests import GenerationRequest

logger = logging.getLogger(__name__)


def _stringify(value: Any) -> str:
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return str(value)


def build_payload(request: GenerationRequest) -> dict[str, str]:
    """
    Convert a generation request into the minimal prediction input.

    Args:
        request: The validated generation request

    Returns:
        Mapping of API input names to string values
    """
    payload: dict[str, str] = {
        "prompt": request.prompt,
        "aspect_ratio": request.aspect_ratio,
    }

    if request.image_prompt:
        payload["image_prompt"] = request.image_prompt

    optional_fields = {
        "image_prompt_strength": request.image_prompt_strength,
        "safety_tolerance": request.safety_tolerance,
        "seed": request.seed,
        "raw": request.raw,
    }
    for key, value in optional_fields.items():
        if value is not None:
            payload[key] = _stringify(value)

    if request.output_format is not None:
        payload["output_format"] = request.output_format

    logger.debug(f"Built prediction payload with keys: {sorted(payload)}")
    return payload


def wrap_input(payload: dict[str, str]) -> dict[str, dict[str, str]]:
    """Wrap a payload under the single "input" key the API expects."""
    return {"input": payload}

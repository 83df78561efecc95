"""Base provider interface for image predictions."""

from typing import Protocol

from typing_extensions import runtime_checkable

from fluxstudio.models.prediction import GenerationResult


@runtime_checkable
class PredictionProvider(Protocol):
    """Protocol for synchronous-wait prediction providers."""

    async def create_prediction(self, payload: dict[str, str]) -> GenerationResult:
        """
        Run one prediction and wait for it to finish.

        Args:
            payload: Flat prediction input (see payload_utils.build_payload)

        Returns:
            The decoded prediction

        Raises:
            TransportError: Network failure
            ApiError: Non-2xx response
            ResponseParseError: Body did not match GenerationResult
        """
        ...

"""Response envelope returned across the command boundary."""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field, model_validator

T = TypeVar("T")


class GenerationResponse(BaseModel, Generic[T]):
    """Standardized response wrapper for every inbound command."""

    success: bool = Field(..., description="Whether the operation succeeded")
    data: Optional[T] = Field(None, description="Command result (type-specific)")
    error: Optional[str] = Field(None, description="Human-readable error if success=False")

    @model_validator(mode="after")
    def validate_success_state(self):
        """Ensure success state is consistent."""
        if self.success is True:
            if self.data is None:
                raise ValueError("data must be present when success=True")
            if self.error is not None:
                raise ValueError("error must be None when success=True")
        else:
            if self.error is None:
                raise ValueError("error must be present when success=False")
            if self.data is not None:
                raise ValueError("data must be None when success=False")
        return self

    @classmethod
    def ok(cls, data: T) -> "GenerationResponse[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "GenerationResponse[T]":
        return cls(success=False, error=error)

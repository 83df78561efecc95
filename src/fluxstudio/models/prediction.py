"""Prediction result models."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class GenerationResult(BaseModel):
    """A prediction as reported by the remote API."""

    id: str = Field(..., description="Opaque prediction identifier")
    output: Optional[list[str]] = Field(None, description="Output URLs; the first is the primary asset")
    status: str = Field(..., description="Prediction state reported by the remote system")
    error: Optional[str] = Field(None, description="Error text reported by the remote system")
    created_at: Optional[str] = Field(None, description="Creation timestamp (not parsed)")
    started_at: Optional[str] = Field(None, description="Start timestamp (not parsed)")
    completed_at: Optional[str] = Field(None, description="Completion timestamp (not parsed)")

    @field_validator("output", mode="before")
    @classmethod
    def normalize_output(cls, value):
        """Single-output models return a bare URL instead of a list."""
        if isinstance(value, str):
            return [value]
        return value

    @property
    def primary_output(self) -> Optional[str]:
        """First output URL, or None when the prediction produced nothing."""
        if not self.output:
            return None
        return self.output[0]

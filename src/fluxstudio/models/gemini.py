"""Typed view of the Gemini generateContent response."""

from pydantic import BaseModel, Field


class GeminiPart(BaseModel):
    text: str


class GeminiContent(BaseModel):
    parts: list[GeminiPart] = Field(..., min_length=1)


class GeminiCandidate(BaseModel):
    content: GeminiContent


class GeminiResponse(BaseModel):
    """Only the fields prompt enhancement reads; everything else is ignored."""

    candidates: list[GeminiCandidate] = Field(..., min_length=1)

    @property
    def first_text(self) -> str:
        return self.candidates[0].content.parts[0].text

"""Gemini Schemas: request body and typed response shape of generateContent.

Invariants:
    - Every level of the response (candidates, content, parts, text) is optional
    - first_text() never raises on absent fields; it falls back to ""
    - Unknown fields (usageMetadata, safetyRatings, ...) are ignored
    - Present fields with the wrong type fail validation (malformed shape)
"""

from pydantic import BaseModel, ConfigDict, Field


class Part(BaseModel):
    model_config = ConfigDict(extra="ignore")
    text: str | None = None


class Content(BaseModel):
    model_config = ConfigDict(extra="ignore")
    parts: list[Part] = Field(default_factory=list)
    role: str | None = None


class Candidate(BaseModel):
    model_config = ConfigDict(extra="ignore")
    content: Content | None = None
    finish_reason: str | None = Field(None, alias="finishReason")


class GenerateContentResponse(BaseModel):
    """Subset of the generateContent response this service reads."""
    model_config = ConfigDict(extra="ignore")
    candidates: list[Candidate] = Field(default_factory=list)

    def first_text(self) -> str:
        """Text of the first part of the first candidate, or ""."""
        if not self.candidates:
            return ""
        content = self.candidates[0].content
        if content is None or not content.parts:
            return ""
        return content.parts[0].text or ""


def build_generate_request(prompt: str) -> dict:
    """JSON body for a single-turn text prompt."""
    return {"contents": [{"parts": [{"text": prompt}]}]}

"""Envelope Schemas: the uniform wrapper around every response body.

Invariants:
    - data is present only on success, error only on failure
    - official_email is always the configured operator email
"""

from typing import Any

from pydantic import BaseModel


class HealthEnvelope(BaseModel):
    """GET /health body."""
    is_success: bool = True
    official_email: str


class Envelope(BaseModel):
    """POST /bfhl body and every error body."""
    is_success: bool
    official_email: str
    data: Any = None
    error: str | None = None

    @classmethod
    def success(cls, official_email: str, data: Any) -> dict[str, Any]:
        # data may legitimately be "" or 0, so only error is dropped
        return cls(
            is_success=True, official_email=official_email, data=data,
        ).model_dump(exclude={"error"})

    @classmethod
    def failure(cls, official_email: str, error: str) -> dict[str, Any]:
        return cls(
            is_success=False, official_email=official_email, error=error,
        ).model_dump(exclude={"data"})

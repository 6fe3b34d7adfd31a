"""Health Probe: liveness endpoint.

Invariants:
    - GET /health always returns 200 with is_success true and the configured email
    - No dependency on the Gemini service
"""

from fastapi import APIRouter, Depends, status

from bfhl.config import Settings, get_settings
from bfhl.schemas.envelope import HealthEnvelope

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK, response_model=HealthEnvelope)
async def health_check(settings: Settings = Depends(get_settings)):
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthEnvelope(official_email=settings.official_email)

"""Health Probe - unauthenticated liveness endpoint."""

from fastapi import APIRouter, status

from rosati_render.schemas.relay import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK, response_model=HealthResponse)
async def health_check():
    """Returns {"ok": true} whenever the process is up."""
    return HealthResponse(ok=True)

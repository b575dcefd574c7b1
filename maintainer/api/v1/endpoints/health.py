"""Health check endpoint. No dependencies; used for liveness probes."""

from fastapi import APIRouter

from maintainer.core.config import get_settings
from maintainer.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return ok and the route groups this process serves."""
    return HealthResponse(services=get_settings().service_names)

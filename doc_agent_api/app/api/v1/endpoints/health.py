"""
Health endpoints for API v1.
"""

from fastapi import APIRouter, Depends

from doc_agent_api.app.api.deps import get_health_service
from doc_agent_api.app.schemas.health import HealthDetailsResponse, HealthResponse
from doc_agent_api.app.services.health_service import HealthService

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check(health: HealthService = Depends(get_health_service)) -> HealthResponse:
    """Cheap liveness probe."""
    return health.check()


@router.get("/details", response_model=HealthDetailsResponse)
def health_details(health: HealthService = Depends(get_health_service)) -> HealthDetailsResponse:
    """Liveness plus uptime, runtime and library versions."""
    return health.details()

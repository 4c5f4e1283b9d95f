from typing import Annotated

from fastapi import APIRouter, Depends

from contact_proxy.core.config import Settings, get_settings
from contact_proxy.models.schemas.health import HealthResponse
from contact_proxy.services.health_service import HealthService

router = APIRouter()


def get_health_service(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthService:
    return HealthService(settings=settings)


@router.get("/health", response_model=HealthResponse)
def health(
    health_service: Annotated[HealthService, Depends(get_health_service)],
) -> HealthResponse:
    return health_service.get_health()

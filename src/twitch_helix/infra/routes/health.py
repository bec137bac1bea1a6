from fastapi import (
    APIRouter,
    Depends
)

from twitch_helix.application.services.health_service import HealthService
from twitch_helix.utils.provider import get_health_service

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health(service: HealthService = Depends(get_health_service)):
    return service.get_health()


@router.get("/env-check")
def env_check(service: HealthService = Depends(get_health_service)):
    return service.get_env_check()


@router.get("/ready")
def ready(service: HealthService = Depends(get_health_service)):
    return service.get_readiness()

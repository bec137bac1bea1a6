from fastapi import (
    APIRouter,
    Depends
)

from twitch_helix.application.services.auth_service import AuthService
from twitch_helix.utils.provider import get_auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/status")
def auth_status(service: AuthService = Depends(get_auth_service)):
    return service.status()


@router.post("/refresh")
async def refresh(service: AuthService = Depends(get_auth_service)):
    return await service.refresh()


@router.get("/validate")
async def validate(service: AuthService = Depends(get_auth_service)):
    return await service.validate()

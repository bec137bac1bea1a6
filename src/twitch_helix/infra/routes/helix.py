from fastapi import (
    APIRouter,
    Depends,
    Query
)
from typing import Annotated

from twitch_helix.application.services.helix_service import HelixService
from twitch_helix.domain.models.filters import (
    ClipFilters,
    PageFilters,
    StreamFilters,
    VideoFilters
)
from twitch_helix.utils.provider import get_helix_service

router = APIRouter(prefix="/helix", tags=["helix"])


@router.get("/streams")
async def streams(
    filters: Annotated[StreamFilters, Query()],
    service: HelixService = Depends(get_helix_service)
):
    return await service.streams(filters)


@router.get("/users")
async def users(
    login: Annotated[list[str], Query(min_length=1)],
    service: HelixService = Depends(get_helix_service)
):
    return await service.users(login)


@router.get("/cheermotes")
async def cheermotes(service: HelixService = Depends(get_helix_service)):
    return await service.cheermotes()


@router.get("/chat/emotes")
async def chat_emotes(
    username: str | None = None,
    service: HelixService = Depends(get_helix_service)
):
    return await service.chat_emotes(username)


@router.get("/chat/badges")
async def chat_badges(
    username: str | None = None,
    service: HelixService = Depends(get_helix_service)
):
    return await service.chat_badges(username)


@router.get("/chat/settings/{username}")
async def chat_settings(username: str, service: HelixService = Depends(get_helix_service)):
    return await service.chat_settings(username)


@router.get("/chat/color")
async def chat_color(
    login: Annotated[list[str], Query(min_length=1)],
    service: HelixService = Depends(get_helix_service)
):
    return await service.chat_color(login)


@router.get("/clips/{username}")
async def clips(
    username: str,
    filters: Annotated[ClipFilters, Query()],
    service: HelixService = Depends(get_helix_service)
):
    return await service.clips(username, filters)


@router.get("/games/top")
async def top_games(
    filters: Annotated[PageFilters, Query()],
    service: HelixService = Depends(get_helix_service)
):
    return await service.top_games(filters)


@router.get("/games")
async def games(
    name: Annotated[list[str], Query(min_length=1)],
    service: HelixService = Depends(get_helix_service)
):
    return await service.games(name)


@router.get("/videos/{username}")
async def videos(
    username: str,
    filters: Annotated[VideoFilters, Query()],
    service: HelixService = Depends(get_helix_service)
):
    return await service.videos(username, filters)

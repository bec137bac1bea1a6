from fastapi import HTTPException
from typing import Any

from twitch_helix.domain.models.filters import (
    ClipFilters,
    PageFilters,
    StreamFilters,
    VideoFilters
)
from twitch_helix.domain.models.result import Result
from twitch_helix.infra.client.twitch_client import TwitchClient


class HelixService:
    def __init__(self, client: TwitchClient):
        self.__client = client

    async def streams(self, filters: StreamFilters) -> dict[str, Any]:
        return self.__unwrap(await self.__client.get_streams(filters))

    async def users(self, logins: list[str]) -> dict[str, Any]:
        return self.__unwrap(await self.__client.get_users(logins))

    async def cheermotes(self) -> dict[str, Any]:
        return self.__unwrap(await self.__client.get_cheermotes())

    async def chat_emotes(self, username: str | None) -> dict[str, Any]:
        return self.__unwrap(await self.__client.get_chat_emotes(username))

    async def chat_badges(self, username: str | None) -> dict[str, Any]:
        return self.__unwrap(await self.__client.get_chat_badges(username))

    async def chat_settings(self, username: str) -> dict[str, Any]:
        return self.__unwrap(await self.__client.get_chat_settings(username))

    async def chat_color(self, logins: list[str]) -> dict[str, Any]:
        return self.__unwrap(await self.__client.get_users_chat_color(logins))

    async def clips(self, username: str, filters: ClipFilters) -> dict[str, Any]:
        return self.__unwrap(await self.__client.get_clips(username, filters))

    async def top_games(self, filters: PageFilters) -> dict[str, Any]:
        return self.__unwrap(await self.__client.get_top_games(filters))

    async def games(self, names: list[str]) -> dict[str, Any]:
        return self.__unwrap(await self.__client.get_games(names))

    async def videos(self, username: str, filters: VideoFilters) -> dict[str, Any]:
        return self.__unwrap(await self.__client.get_videos(username, filters))

    @staticmethod
    def __unwrap(result: Result) -> dict[str, Any]:
        if not result.ok:
            raise HTTPException(status_code=502, detail=result.to_dict())

        return result.to_dict()

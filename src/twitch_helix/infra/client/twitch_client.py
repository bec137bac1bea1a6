import functools
import httpx
import logging

from pathlib import Path
from typing import (
    Any,
    Awaitable,
    Callable
)

from twitch_helix.config.settings import Settings
from twitch_helix.domain.models.filters import (
    cap,
    ClipFilters,
    PageFilters,
    Params,
    StreamFilters,
    VideoFilters
)
from twitch_helix.domain.models.result import Result
from twitch_helix.domain.repository.token_repository import TokenRepository
from twitch_helix.infra.client.token_manager import (
    describe,
    TokenManager
)
from twitch_helix.infra.persistence.token_repository_file import FileTokenRepository

logger = logging.getLogger(__name__)


def enveloped(method: Callable[..., Awaitable[Result]]) -> Callable[..., Awaitable[Result]]:
    @functools.wraps(method)
    async def wrapper(*args, **kwargs) -> Result:
        try:
            return await method(*args, **kwargs)
        except Exception as e:
            logger.warning("%s failed: %s", method.__name__, describe(e))

            return Result.failure(error=describe(e))

    return wrapper


class TwitchClient:
    def __init__(
        self,
        settings: Settings,
        repository: TokenRepository,
        transport: httpx.AsyncBaseTransport | None = None
    ):
        self.__settings = settings
        self.__http = httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT, transport=transport)
        self.tokens = TokenManager(settings, repository, self.__http)

    @classmethod
    def from_credentials(
        cls,
        client_id: str,
        client_secret: str,
        tokens_path: str | Path | None = None,
        **overrides: Any
    ) -> "TwitchClient":
        settings = Settings(TW_CLIENT_ID=client_id, TW_CLIENT_SECRET=client_secret, **overrides)

        return cls(settings, FileTokenRepository(tokens_path or settings.TOKENS_PATH))

    async def initialize(self) -> Result:
        return await self.tokens.initialize()

    async def aclose(self) -> None:
        await self.tokens.stop_periodic_validation()
        await self.__http.aclose()

    async def __aenter__(self) -> "TwitchClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def get_headers(self) -> dict[str, str]:
        return {
            "Authorization": self.tokens.token.authorization,
            "Client-Id": self.__settings.TW_CLIENT_ID,
        }

    async def _request(self, endpoint: str, params: Params | None = None, method: str = "GET") -> Result:
        try:
            ensured = await self.tokens.ensure_valid()

            if not ensured.ok:
                return ensured

            r = await self.__http.request(
                method,
                f"{self.__settings.TW_HELIX_URL}/{endpoint}",
                params=params or [],
                headers=self.get_headers()
            )

            if not r.is_success:
                logger.debug("%s %s -> %s %s", method, endpoint, r.status_code, r.reason_phrase)

                return Result.failure(status_text=r.reason_phrase)

            return Result.success(r.json().get("data"))
        except Exception as e:
            return Result.failure(error=describe(e))

    async def _user_ids(self, usernames: list[str]) -> Result:
        users = await self.get_users(usernames)

        if not users.ok:
            return Result.failure(error=users.reason)

        ids = [user["id"] for user in users.result or []]

        if not ids:
            return Result.failure(error=f"User not found: {', '.join(usernames)}")

        return Result.success(ids)

    async def _user_id(self, username: str) -> Result:
        ids = await self._user_ids([username])

        if not ids.ok:
            return ids

        return Result.success(ids.result[0])

    async def _game_ids(self, game_names: list[str]) -> Result:
        games = await self.get_games(game_names)

        if not games.ok:
            return Result.failure(error=games.reason)

        ids = [game["id"] for game in games.result or []]

        if not ids:
            return Result.failure(error=f"Game not found: {', '.join(game_names)}")

        return Result.success(ids)

    @enveloped
    async def get_streams(self, filters: StreamFilters | dict | None = None) -> Result:
        filters = StreamFilters.model_validate(filters or {})
        params = filters.to_params()

        if filters.games_names:
            game_ids = await self._game_ids(filters.games_names)

            if not game_ids.ok:
                return game_ids

            params.extend(("game_id", game_id) for game_id in cap(game_ids.result))

        if filters.users_names:
            user_ids = await self._user_ids(filters.users_names)

            if not user_ids.ok:
                return user_ids

            params.extend(("user_id", user_id) for user_id in cap(user_ids.result))

        return await self._request("streams", params)

    @enveloped
    async def get_users(self, usernames: list[str] | str) -> Result:
        if isinstance(usernames, str):
            usernames = [usernames]

        return await self._request("users", [("login", name) for name in cap(usernames)])

    @enveloped
    async def get_cheermotes(self) -> Result:
        return await self._request("bits/cheermotes")

    @enveloped
    async def get_chat_emotes(self, username: str | None = None) -> Result:
        if not username:
            return await self._request("chat/emotes/global")

        broadcaster = await self._user_id(username)

        if not broadcaster.ok:
            return broadcaster

        return await self._request("chat/emotes", [("broadcaster_id", broadcaster.result)])

    @enveloped
    async def get_chat_badges(self, username: str | None = None) -> Result:
        if not username:
            return await self._request("chat/badges/global")

        broadcaster = await self._user_id(username)

        if not broadcaster.ok:
            return broadcaster

        return await self._request("chat/badges", [("broadcaster_id", broadcaster.result)])

    @enveloped
    async def get_chat_settings(self, username: str) -> Result:
        broadcaster = await self._user_id(username)

        if not broadcaster.ok:
            return broadcaster

        return await self._request("chat/settings", [("broadcaster_id", broadcaster.result)])

    @enveloped
    async def get_users_chat_color(self, usernames: list[str] | str) -> Result:
        if isinstance(usernames, str):
            usernames = [usernames]

        user_ids = await self._user_ids(usernames)

        if not user_ids.ok:
            return user_ids

        return await self._request("chat/color", [("user_id", user_id) for user_id in cap(user_ids.result)])

    @enveloped
    async def get_clips(self, username: str, filters: ClipFilters | dict | None = None) -> Result:
        filters = ClipFilters.model_validate(filters or {})

        broadcaster = await self._user_id(username)

        if not broadcaster.ok:
            return broadcaster

        return await self._request("clips", [("broadcaster_id", broadcaster.result), *filters.to_params()])

    @enveloped
    async def get_top_games(self, filters: PageFilters | dict | None = None) -> Result:
        filters = PageFilters.model_validate(filters or {})

        return await self._request("games/top", filters.to_params())

    @enveloped
    async def get_games(self, game_names: list[str] | str) -> Result:
        if isinstance(game_names, str):
            game_names = [game_names]

        return await self._request("games", [("name", name) for name in cap(game_names)])

    @enveloped
    async def get_videos(self, username: str, filters: VideoFilters | dict | None = None) -> Result:
        filters = VideoFilters.model_validate(filters or {})

        user = await self._user_id(username)

        if not user.ok:
            return user

        params = [("user_id", user.result), *filters.to_params()]

        if filters.game_name:
            game_ids = await self._game_ids([filters.game_name])

            if not game_ids.ok:
                return game_ids

            params.append(("game_id", game_ids.result[0]))

        return await self._request("videos", params)

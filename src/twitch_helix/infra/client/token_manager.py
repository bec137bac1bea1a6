import asyncio
import contextlib
import httpx
import logging
import time

from twitch_helix.config.settings import Settings
from twitch_helix.domain.models.result import Result
from twitch_helix.domain.models.token import Token
from twitch_helix.domain.repository.token_repository import TokenRepository

logger = logging.getLogger(__name__)


def describe(e: Exception) -> str:
    return f"{e.__class__.__name__}: {e}"


class TokenManager:
    def __init__(self, settings: Settings, repository: TokenRepository, http: httpx.AsyncClient):
        self.__settings = settings
        self.__http = http
        self.repository = repository
        self.token: Token = repository.get()

        self.__validation_task: asyncio.Task | None = None

    def is_expired(self) -> bool:
        return self.token.is_expired()

    async def generate(self) -> Result:
        params = {
            "client_id": self.__settings.TW_CLIENT_ID,
            "client_secret": self.__settings.TW_CLIENT_SECRET,
            "grant_type": "client_credentials",
        }

        try:
            r = await self.__http.post(self.__settings.TW_TOKEN_URL, params=params)

            if not r.is_success:
                logger.warning("Token request rejected: %s %s", r.status_code, r.reason_phrase)

                return Result.failure(status_text=r.reason_phrase)

            payload = r.json()

            token = Token(
                created_at=int(time.time() * 1000),
                access_token=payload["access_token"],
                expires_in=payload.get("expires_in", 0),
                token_type="Bearer",
            )

            self.__store(token)
        except Exception as e:
            logger.warning("Token request failed: %s", describe(e))

            return Result.failure(error=describe(e))

        return Result.success(token)

    async def refresh(self) -> Result:
        generated = await self.generate()

        if not generated.ok:
            return Result.failure(error=generated.reason)

        logger.info("App access token refreshed, expires in %ss", generated.result.expires_in)

        return Result.success(generated.result)

    async def ensure_valid(self) -> Result:
        if self.is_expired():
            return await self.refresh()

        return Result.success(self.token)

    async def validate(self, retries: int | None = None) -> Result:
        if retries is None:
            retries = self.__settings.VALIDATE_MAX_RETRIES

        try:
            if not self.token.is_valid:
                refreshed = await self.refresh()

                if not refreshed.ok:
                    return refreshed

            r = await self.__http.get(
                self.__settings.TW_VALIDATE_URL,
                headers={"Authorization": f"Bearer {self.token.access_token}"}
            )

            if r.status_code == 401 and retries > 0:
                logger.info("Token rejected by validation endpoint, refreshing")

                refreshed = await self.refresh()

                if not refreshed.ok:
                    return refreshed

                return await self.validate(retries - 1)

            if not r.is_success:
                return Result.failure(status_text=r.reason_phrase)

            return Result.success(r.json())
        except Exception as e:
            return Result.failure(error=describe(e))

    def start_periodic_validation(self) -> None:
        if self.__validation_task is not None:
            self.__validation_task.cancel()

        self.__validation_task = asyncio.create_task(self.__validate_periodically())

    async def stop_periodic_validation(self) -> None:
        task, self.__validation_task = self.__validation_task, None

        if task is None:
            return

        task.cancel()

        with contextlib.suppress(asyncio.CancelledError):
            await task

    @property
    def is_validating(self) -> bool:
        return self.__validation_task is not None and not self.__validation_task.done()

    async def initialize(self) -> Result:
        if self.is_expired():
            refreshed = await self.refresh()

            if not refreshed.ok:
                logger.error("Could not obtain an app access token: %s", refreshed.reason)

        validation = await self.validate()

        if not validation.ok:
            logger.error("Token validation failed: %s", validation.reason)

        self.start_periodic_validation()

        return validation

    async def __validate_periodically(self) -> None:
        interval = self.__settings.VALIDATE_INTERVAL

        while True:
            await asyncio.sleep(interval)

            validation = await self.validate()

            if not validation.ok:
                logger.error("Token validation failed: %s", validation.reason)

    def __store(self, token: Token) -> None:
        self.repository.set(token)
        self.token = token

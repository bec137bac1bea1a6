from fastapi import Depends
from functools import lru_cache

from twitch_helix.application.services.auth_service import AuthService
from twitch_helix.application.services.health_service import HealthService
from twitch_helix.application.services.helix_service import HelixService
from twitch_helix.config.settings import Settings
from twitch_helix.domain.repository.token_repository import TokenRepository
from twitch_helix.infra.client.twitch_client import TwitchClient
from twitch_helix.infra.persistence.token_repository_file import FileTokenRepository


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


@lru_cache(maxsize=1)
def get_repository() -> TokenRepository:
    settings = get_settings()

    return FileTokenRepository(settings.TOKENS_PATH)


@lru_cache(maxsize=1)
def get_client() -> TwitchClient:
    return TwitchClient(get_settings(), get_repository())


def get_health_service(
    settings: Settings = Depends(get_settings),
    client: TwitchClient = Depends(get_client)
) -> HealthService:
    return HealthService(settings, client)


def get_auth_service(client: TwitchClient = Depends(get_client)) -> AuthService:
    return AuthService(client)


def get_helix_service(client: TwitchClient = Depends(get_client)) -> HelixService:
    return HelixService(client)

from datetime import (
    datetime,
    timezone
)
from fastapi import HTTPException

from twitch_helix.config.settings import Settings
from twitch_helix.infra.client.twitch_client import TwitchClient


class HealthService:
    def __init__(self, settings: Settings, client: TwitchClient):
        self.__settings = settings
        self.__client = client

    def get_health(self) -> dict[str, str]:
        return {
            "status": "ok",
            "service": self.__settings.SERVICE_NAME,
            "ts_utc": datetime\
                        .now(timezone.utc)
                        .isoformat(timespec="seconds")
                        .replace("+00:00","Z")
        }

    def get_env_check(self):
        return {
            "client_id_set": bool(self.__settings.TW_CLIENT_ID),
            "client_secret_set": bool(self.__settings.TW_CLIENT_SECRET),
            "helix_url": self.__settings.TW_HELIX_URL,
            "tokens_path": self.__settings.TOKENS_PATH,
            "validate_interval_s": self.__settings.VALIDATE_INTERVAL,
        }

    def get_readiness(self) -> dict:
        tokens = self.__client.tokens

        if tokens.is_expired():
            raise HTTPException(status_code=503, detail="Twitch app token missing or expired")

        return {
            "ready": True,
            "token_expires_at": tokens.token.expires_at,
            "periodic_validation": tokens.is_validating,
        }

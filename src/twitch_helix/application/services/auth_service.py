from fastapi import HTTPException

from twitch_helix.domain.models.result import Result
from twitch_helix.infra.client.twitch_client import TwitchClient


class AuthService:
    def __init__(self, client: TwitchClient):
        self.__client = client

    def status(self) -> dict:
        token = self.__client.tokens.token

        return {
            "logged_in": token.is_valid,
            "expired": token.is_expired(),
            "expires_at": token.expires_at if token.is_valid else None,
            "token_type": token.token_type,
            "periodic_validation": self.__client.tokens.is_validating,
        }

    async def refresh(self) -> dict:
        return self.__unwrap(await self.__client.tokens.refresh(), exclude={"access_token"})

    async def validate(self) -> dict:
        return self.__unwrap(await self.__client.tokens.validate())

    @staticmethod
    def __unwrap(result: Result, exclude: set[str] | None = None) -> dict:
        if not result.ok:
            raise HTTPException(status_code=502, detail=result.to_dict())

        payload = result.to_dict()

        if exclude and isinstance(payload["result"], dict):
            payload["result"] = {k: v for k, v in payload["result"].items() if k not in exclude}

        return payload

import httpx
import pytest
import pytest_asyncio
import time

from twitch_helix.config.settings import Settings
from twitch_helix.domain.models.token import Token
from twitch_helix.infra.client.twitch_client import TwitchClient
from twitch_helix.infra.persistence.token_repository_memory import MemoryTokenRepository


class FakeTwitch:
    """In-memory stand-in for id.twitch.tv and api.twitch.tv/helix."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], object] = {}
        self.issued = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        route = self.routes.get((request.method, request.url.path))

        if isinstance(route, Exception):
            raise route
        if isinstance(route, httpx.Response):
            return route
        if callable(route):
            return route(request)

        return self.default(request)

    def default(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path

        if path == "/oauth2/token":
            self.issued += 1

            return httpx.Response(200, json={
                "access_token": f"token-{self.issued}",
                "expires_in": 5_000_000,
                "token_type": "bearer",
            })

        if path == "/oauth2/validate":
            return httpx.Response(200, json={"client_id": "client-id", "expires_in": 4_999_000, "scopes": []})

        if path == "/helix/users":
            logins = request.url.params.get_list("login")

            return httpx.Response(200, json={"data": [{"id": f"id-{login}", "login": login} for login in logins]})

        if path == "/helix/games":
            names = request.url.params.get_list("name")

            return httpx.Response(200, json={"data": [{"id": f"game-{name}", "name": name} for name in names]})

        if path == "/helix/streams":
            user_ids = request.url.params.get_list("user_id")

            return httpx.Response(200, json={
                "data": [{"user_id": user_id, "user_login": user_id.removeprefix("id-"), "type": "live"} for user_id in user_ids],
                "pagination": {},
            })

        return httpx.Response(200, json={"data": [{"path": path}]})

    def to(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == path]


@pytest.fixture
def fake_twitch() -> FakeTwitch:
    return FakeTwitch()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        TW_CLIENT_ID="client-id",
        TW_CLIENT_SECRET="client-secret",
        TOKENS_PATH=str(tmp_path / ".tokens.json"),
        VALIDATE_INTERVAL=3600,
    )


@pytest.fixture
def fresh_token() -> Token:
    return Token(
        created_at=int(time.time() * 1000),
        access_token="cached-token",
        expires_in=3600,
        token_type="Bearer",
    )


@pytest.fixture
def repository(fresh_token) -> MemoryTokenRepository:
    return MemoryTokenRepository(fresh_token)


@pytest_asyncio.fixture
async def client(settings, repository, fake_twitch):
    twitch = TwitchClient(settings, repository, transport=httpx.MockTransport(fake_twitch))

    yield twitch

    await twitch.aclose()

import logging
import sys

from contextlib import asynccontextmanager
from fastapi import FastAPI

from twitch_helix.infra.routes import (
    auth,
    health,
    helix
)
from twitch_helix.utils.provider import (
    get_client,
    get_settings
)

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        stream=sys.stdout,
        format="%(asctime)s %(levelname)-8s %(name)s  %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.dependency_overrides.get(get_settings, get_settings)()
    client = app.dependency_overrides.get(get_client, get_client)()

    configure_logging(settings.LOG_LEVEL)

    validation = await client.initialize()

    if validation.ok:
        logger.info("Twitch client ready (%s)", settings.SERVICE_NAME)

    try:
        yield
    finally:
        await client.aclose()


def create_app() -> FastAPI:
    app = FastAPI(title="Twitch Helix API", lifespan=lifespan)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(helix.router)

    return app


app = create_app()

from pathlib import Path
from pydantic import (
    Field,
    StringConstraints
)
from pydantic_settings import (
    BaseSettings,
    SettingsConfigDict
)
from typing import Annotated

ROOT = Path(__file__).resolve().parents[3]
ENV_PATH = ROOT / ".env"
TOKENS_PATH = ROOT / ".tokens.json"


class Settings(BaseSettings):
    TW_CLIENT_ID    : Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    TW_CLIENT_SECRET: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

    SERVICE_NAME    : str = "twitch-helix-api"
    LOG_LEVEL       : str = "INFO"

    TW_TOKEN_URL   : str = "https://id.twitch.tv/oauth2/token"
    TW_VALIDATE_URL: str = "https://id.twitch.tv/oauth2/validate"
    TW_HELIX_URL   : str = "https://api.twitch.tv/helix"

    TOKENS_PATH: str = str(TOKENS_PATH)

    HTTP_TIMEOUT        : float = 20.0
    VALIDATE_INTERVAL   : Annotated[float, Field(gt=0)] = 3600.0
    VALIDATE_MAX_RETRIES: Annotated[int, Field(ge=0)] = 1

    model_config = SettingsConfigDict(
        env_file=str(ENV_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
    )

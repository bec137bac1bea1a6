import json
import logging

from pathlib import Path

from pydantic import ValidationError

from twitch_helix.domain.models.token import Token
from twitch_helix.domain.repository.token_repository import TokenRepository

logger = logging.getLogger(__name__)


class FileTokenRepository(TokenRepository):
    def __init__(self, path: str | Path):
        self.path = Path(path)

        super().__init__()

    def load(self) -> Token:
        if not self.path.exists():
            return Token()

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))

            return Token.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning("Ignoring unreadable token file %s: %s", self.path, e)

            return Token()

    def save(self, token: Token) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(token.model_dump(), ensure_ascii=False, indent=4),
            encoding="utf-8"
        )

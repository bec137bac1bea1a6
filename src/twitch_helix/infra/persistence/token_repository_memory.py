from twitch_helix.domain.models.token import Token
from twitch_helix.domain.repository.token_repository import TokenRepository


class MemoryTokenRepository(TokenRepository):
    def __init__(self, token: Token | None = None):
        self.__token = token or Token()

        super().__init__()

    def load(self) -> Token:
        return self.__token

    def save(self, token: Token) -> None:
        self.__token = token

import time

from pydantic import BaseModel


class Token(BaseModel):
    created_at  : int        = 0
    access_token: str | None = None
    expires_in  : int        = 0
    token_type  : str        = "Bearer"

    @property
    def expires_at(self) -> int:
        return self.created_at // 1000 + self.expires_in

    @property
    def is_valid(self) -> bool:
        return bool(self.access_token)

    def is_expired(self, now: float | None = None) -> bool:
        if not self.is_valid:
            return True

        now = int(time.time() if now is None else now)

        return now >= self.expires_at

    @property
    def authorization(self) -> str:
        return f"{self.token_type} {self.access_token}"

from pydantic import (
    BaseModel,
    ConfigDict,
    Field
)
from typing import Any


class Result(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok         : bool
    result     : Any        = None
    error      : str | None = None
    status_text: str | None = Field(default=None, serialization_alias="statusText")

    @classmethod
    def success(cls, result: Any) -> "Result":
        return cls(ok=True, result=result)

    @classmethod
    def failure(cls, error: str | None = None, status_text: str | None = None) -> "Result":
        return cls(ok=False, error=error, status_text=status_text)

    @property
    def reason(self) -> str | None:
        return self.error if self.error is not None else self.status_text

    def to_dict(self) -> dict[str, Any]:
        if self.ok:
            return {"ok": True, "result": self.model_dump(mode="json")["result"]}

        return self.model_dump(mode="json", by_alias=True, exclude_none=True, exclude={"result"})

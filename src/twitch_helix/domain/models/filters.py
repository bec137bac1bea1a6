from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator
)
from typing import (
    Annotated,
    Any,
    ClassVar,
    Literal
)

MAX_LIST_SIZE = 100

Params = list[tuple[str, Any]]


def cap(values: list[Any] | None) -> list[Any]:
    return list(values or [])[:MAX_LIST_SIZE]


class PageFilters(BaseModel):
    model_config = ConfigDict(extra="forbid")

    first : Annotated[int, Field(ge=1, le=100)] | None = None
    before: str | None = None
    after : str | None = None

    # Fields resolved to ids by the client instead of being sent verbatim.
    resolved_fields: ClassVar[tuple[str, ...]] = ()

    def to_params(self) -> Params:
        params: Params = []

        for key, value in self.model_dump(exclude_none=True, exclude=set(self.resolved_fields)).items():
            if isinstance(value, list):
                params.extend((key, item) for item in cap(value))
            else:
                params.append((key, value))

        return params


class StreamFilters(PageFilters):
    users_names: list[str] | None = None
    games_names: list[str] | None = None
    type       : Literal["all", "live"] | None = None
    languages  : list[str] | None = None

    resolved_fields: ClassVar[tuple[str, ...]] = ("users_names", "games_names")

    @field_validator("users_names", "games_names", "languages", mode="before")
    @classmethod
    def single_to_list(cls, v: Any) -> Any:
        if isinstance(v, str):
            return [v]

        return v

    def to_params(self) -> Params:
        params = super().to_params()

        # Helix names the repeated key "language".
        return [("language", value) if key == "languages" else (key, value) for key, value in params]


class ClipFilters(PageFilters):
    started_at: str | None = None
    ended_at  : str | None = None


class VideoFilters(PageFilters):
    game_name: str | None = None
    language : str | None = None
    period   : Literal["all", "day", "week", "month"] | None = None
    sort     : Literal["time", "trending", "views"] | None = None
    type     : Literal["all", "archive", "highlight", "upload"] | None = None

    resolved_fields: ClassVar[tuple[str, ...]] = ("game_name",)

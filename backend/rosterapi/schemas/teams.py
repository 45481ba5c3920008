from pydantic import BaseModel, Field, field_validator


class TeamWithChampion(BaseModel):
    """Full team view, used for create requests and single-team responses.

    `id` is only ever emitted; a value sent by a client is ignored.
    """

    id: int | None = None
    team_name: str = Field(alias="teamName", min_length=1, max_length=80)
    wins: int | None = Field(default=None, ge=0)
    losses: int | None = Field(default=None, ge=0)
    is_current_champion: bool | None = Field(default=None, alias="isCurrentChampion")

    model_config = {"populate_by_name": True, "str_strip_whitespace": True}


class TeamNoChampion(BaseModel):
    """List view: everything but the champion flag."""

    id: int | None = None
    team_name: str = Field(alias="teamName")
    wins: int | None = None
    losses: int | None = None

    model_config = {"populate_by_name": True}


class TeamUpdate(BaseModel):
    """Partial update body. Only the fields sent are applied."""

    team_name: str | None = Field(default=None, alias="teamName", min_length=1, max_length=80)
    wins: int | None = Field(default=None, ge=0)
    losses: int | None = Field(default=None, ge=0)
    is_current_champion: bool | None = Field(default=None, alias="isCurrentChampion")

    model_config = {"populate_by_name": True, "str_strip_whitespace": True}

    @field_validator("team_name")
    @classmethod
    def team_name_not_null(cls, v):
        if v is None:
            raise ValueError("teamName cannot be null")
        return v

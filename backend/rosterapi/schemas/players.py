from pydantic import BaseModel, Field


class PlayerCreate(BaseModel):
    # teamName is not part of the write view; extra keys are dropped
    name: str = Field(min_length=1, max_length=80)
    position: str | None = Field(default=None, max_length=40)
    team_id: int = Field(alias="teamId")

    model_config = {"populate_by_name": True, "str_strip_whitespace": True}


class PlayerOut(BaseModel):
    name: str
    position: str | None = None
    team_name: str | None = Field(default=None, alias="teamName")

    model_config = {"populate_by_name": True}

"""League team model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Team(BaseModel):
    """A team registered in a league."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    league_id: str | None = None
    name: str
    color: str | None = None
    is_official: bool = False

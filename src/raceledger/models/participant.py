"""League participant model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from raceledger.config import DRIVER_ROLES


class Participant(BaseModel):
    """A user's participation in a league."""

    model_config = ConfigDict(frozen=True)

    id: str
    league_id: str | None = None
    user_id: str | None = None
    status: str | None = None
    roles: list[str] = []
    team_name: str | None = None
    user_nickname: str | None = None

    @property
    def is_driver(self) -> bool:
        """True for primary (player) or reserve drivers."""
        return any(role in DRIVER_ROLES for role in self.roles)

"""Team schema definitions."""
from __future__ import annotations

from typing import List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from teamhub.schemas.player import Player, roster_order


class TeamBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str = Field(min_length=1)
    location: str
    mascotte: Optional[str] = None
    players: Set[Player] = Field(default_factory=set)

    @field_serializer("players")
    def serialize_players(self, players: Set[Player]) -> List[Player]:
        # Sets have no stable order; keep responses deterministic
        return sorted(players, key=roster_order)


class TeamCreate(TeamBase):
    """Request body for creating or replacing a team."""


class Team(TeamBase):
    id: Optional[int] = None

"""Player schema definitions."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Player(BaseModel):
    """A roster entry. Two players are the same player when name and location match."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    name: str = Field(min_length=1)
    location: str


def roster_order(player: Player) -> tuple[str, str]:
    return (player.name, player.location)

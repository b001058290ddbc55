"""Entity store contract shared by the in-memory and SQL backends."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from teamhub.schemas import Player, Team
from teamhub.schemas.player import roster_order


class TeamStore(ABC):
    """Holds teams and their rosters.

    ``save`` assigns an id when the team has none and replaces the stored
    record when it has one. Lookups raise ``TeamNotFoundError`` instead of
    returning ``None``.
    """

    backend: str = "abstract"

    @abstractmethod
    def save(self, team: Team) -> int:
        ...

    @abstractmethod
    def find_by_name(self, name: str) -> Team:
        ...

    @abstractmethod
    def find_by_id(self, team_id: int) -> Team:
        ...

    @abstractmethod
    def list_teams(self) -> List[Team]:
        ...

    @abstractmethod
    def delete(self, team_id: int) -> None:
        ...

    def list_players(self) -> List[Player]:
        players = [player for team in self.list_teams() for player in team.players]
        return sorted(players, key=roster_order)

"""Team service layer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from teamhub.core.cache import cache_result, clear_cache_pattern
from teamhub.schemas import Team, TeamCreate
from teamhub.store import TeamStore


@dataclass
class TeamService:
    store: TeamStore

    @cache_result(key_prefix="team_by_name")
    def get_team_by_name(self, name: str) -> Dict:
        return self._to_dict(self.store.find_by_name(name))

    @cache_result(key_prefix="team_by_id")
    def get_team(self, team_id: int) -> Dict:
        return self._to_dict(self.store.find_by_id(team_id))

    def list_teams(self) -> List[Dict]:
        return [self._to_dict(team) for team in self.store.list_teams()]

    def create_team(self, payload: TeamCreate) -> Dict:
        team = Team.model_validate(payload.model_dump())
        team_id = self.store.save(team)
        self._invalidate()
        return self._to_dict(self.store.find_by_id(team_id))

    def replace_team(self, team_id: int, payload: TeamCreate) -> Dict:
        team = Team.model_validate({**payload.model_dump(), "id": team_id})
        self.store.save(team)
        self._invalidate()
        return self._to_dict(self.store.find_by_id(team_id))

    def delete_team(self, team_id: int) -> None:
        self.store.delete(team_id)
        self._invalidate()

    def _invalidate(self) -> None:
        clear_cache_pattern("team_by_*")

    def _to_dict(self, team: Team) -> Dict:
        return team.model_dump(mode="json")

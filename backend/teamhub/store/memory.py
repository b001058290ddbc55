"""Lock-guarded in-memory team store."""
from __future__ import annotations

import itertools
import threading
from typing import Dict, List

from teamhub.core.exceptions import TeamNotFoundError
from teamhub.core.logging import get_logger
from teamhub.schemas import Team
from teamhub.store.base import TeamStore

logger = get_logger(__name__)


class InMemoryTeamStore(TeamStore):
    backend = "memory"

    def __init__(self) -> None:
        self._teams: Dict[int, Team] = {}
        self._ids = itertools.count(1)
        self._lock = threading.RLock()

    def save(self, team: Team) -> int:
        with self._lock:
            if team.id is None:
                team_id = next(self._ids)
            elif team.id in self._teams:
                team_id = team.id
            else:
                raise TeamNotFoundError(team_id=team.id)
            self._teams[team_id] = team.model_copy(update={"id": team_id}, deep=True)
        logger.info("team_saved", backend=self.backend, team_id=team_id, name=team.name)
        return team_id

    def find_by_name(self, name: str) -> Team:
        with self._lock:
            # ids are issued in increasing order and dicts keep insertion order
            for team in self._teams.values():
                if team.name == name:
                    return team.model_copy(deep=True)
        raise TeamNotFoundError(name=name)

    def find_by_id(self, team_id: int) -> Team:
        with self._lock:
            team = self._teams.get(team_id)
            if team is None:
                raise TeamNotFoundError(team_id=team_id)
            return team.model_copy(deep=True)

    def list_teams(self) -> List[Team]:
        with self._lock:
            return [team.model_copy(deep=True) for team in self._teams.values()]

    def delete(self, team_id: int) -> None:
        with self._lock:
            if self._teams.pop(team_id, None) is None:
                raise TeamNotFoundError(team_id=team_id)
        logger.info("team_deleted", backend=self.backend, team_id=team_id)

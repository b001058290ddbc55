"""Player service layer."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from teamhub.store import TeamStore


@dataclass
class PlayerService:
    store: TeamStore

    def get_players(self) -> List[Dict]:
        return [player.model_dump(mode="json") for player in self.store.list_players()]

"""Player endpoints."""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from teamhub.api.deps import get_player_service
from teamhub.schemas import Player
from teamhub.services.player_service import PlayerService

router = APIRouter()


@router.get("", response_model=List[Player])
async def list_players(service: PlayerService = Depends(get_player_service)) -> List[Player]:
    """Get every rostered player across all teams."""
    return service.get_players()

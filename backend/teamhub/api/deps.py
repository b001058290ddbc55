"""Common API dependencies."""
from fastapi import Depends, Request

from teamhub.core.config import Settings
from teamhub.services.player_service import PlayerService
from teamhub.services.team_service import TeamService
from teamhub.store import TeamStore


def get_team_store(request: Request) -> TeamStore:
    return request.app.state.team_store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_team_service(store: TeamStore = Depends(get_team_store)) -> TeamService:
    return TeamService(store)


def get_player_service(store: TeamStore = Depends(get_team_store)) -> PlayerService:
    return PlayerService(store)

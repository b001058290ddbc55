"""Team collection endpoints: list, read, create, replace, delete."""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from teamhub.api.deps import get_team_service
from teamhub.core.exceptions import TeamNotFoundError
from teamhub.schemas import Team, TeamCreate
from teamhub.services.team_service import TeamService

router = APIRouter()


@router.get("", response_model=List[Team])
async def list_teams(service: TeamService = Depends(get_team_service)) -> List[Team]:
    return service.list_teams()


@router.get("/{team_id}", response_model=Team)
async def get_team(
    team_id: int,
    response: Response,
    service: TeamService = Depends(get_team_service),
) -> Team:
    try:
        team = service.get_team(team_id)
    except TeamNotFoundError:
        raise HTTPException(status_code=404, detail="Team not found")
    response.headers["Cache-Control"] = "public, max-age=1800"  # 30 minutes
    return team


@router.post("", response_model=Team, status_code=status.HTTP_201_CREATED)
async def create_team(
    payload: TeamCreate,
    service: TeamService = Depends(get_team_service),
) -> Team:
    return service.create_team(payload)


@router.put("/{team_id}", response_model=Team)
async def replace_team(
    team_id: int,
    payload: TeamCreate,
    service: TeamService = Depends(get_team_service),
) -> Team:
    """Replace an existing team, roster included."""
    try:
        return service.replace_team(team_id, payload)
    except TeamNotFoundError:
        raise HTTPException(status_code=404, detail="Team not found")


@router.delete("/{team_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_team(
    team_id: int,
    service: TeamService = Depends(get_team_service),
) -> Response:
    try:
        service.delete_team(team_id)
    except TeamNotFoundError:
        raise HTTPException(status_code=404, detail="Team not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)

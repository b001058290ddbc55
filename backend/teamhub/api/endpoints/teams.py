"""Team lookup by name."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Response

from teamhub.api.deps import get_team_service
from teamhub.core.exceptions import TeamNotFoundError
from teamhub.schemas import Team
from teamhub.services.team_service import TeamService

router = APIRouter()


@router.get("/{name}", response_model=Team)
async def get_team_by_name(
    name: str,
    response: Response,
    service: TeamService = Depends(get_team_service),
) -> Team:
    """Get a team by its exact, case-sensitive name."""
    try:
        team = service.get_team_by_name(name)
    except TeamNotFoundError:
        raise HTTPException(status_code=404, detail="Team not found")
    response.headers["Cache-Control"] = "public, max-age=1800"  # 30 minutes
    return team

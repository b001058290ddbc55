"""Domain exceptions raised by the entity store."""
from typing import Any, Dict, Optional


class TeamHubError(Exception):
    """Base class for service errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TeamNotFoundError(TeamHubError):
    """Raised when a team lookup by name or id matches nothing."""

    def __init__(self, *, name: Optional[str] = None, team_id: Optional[int] = None):
        if name is not None:
            key = f"name={name!r}"
        else:
            key = f"id={team_id}"
        super().__init__(
            f"Team not found: {key}",
            details={"name": name, "team_id": team_id},
        )
        self.name = name
        self.team_id = team_id

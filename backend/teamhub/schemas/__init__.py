from teamhub.schemas.player import Player
from teamhub.schemas.team import Team, TeamCreate

__all__ = ["Player", "Team", "TeamCreate"]

"""SQLAlchemy-backed team store."""
from __future__ import annotations

from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload, sessionmaker

from teamhub.core.exceptions import TeamNotFoundError
from teamhub.core.logging import get_logger
from teamhub.db import models
from teamhub.schemas import Team
from teamhub.store.base import TeamStore

logger = get_logger(__name__)


class SqlTeamStore(TeamStore):
    """Stores teams in the ``teams``/``players`` tables, one transaction per call."""

    backend = "sql"

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def save(self, team: Team) -> int:
        with self._session_factory() as session, session.begin():
            if team.id is None:
                row = models.Team()
                session.add(row)
            else:
                row = self._get_row(session, team.id)
            row.name = team.name
            row.location = team.location
            row.mascotte = team.mascotte
            self._sync_roster(row, team)
            session.flush()
            team_id = row.id
        logger.info("team_saved", backend=self.backend, team_id=team_id, name=team.name)
        return team_id

    def find_by_name(self, name: str) -> Team:
        with self._session_factory() as session:
            row = session.scalars(
                select(models.Team)
                .options(selectinload(models.Team.players))
                .where(models.Team.name == name)
                .order_by(models.Team.id)
                .limit(1)
            ).first()
            if row is None:
                raise TeamNotFoundError(name=name)
            return Team.model_validate(row)

    def find_by_id(self, team_id: int) -> Team:
        with self._session_factory() as session:
            return Team.model_validate(self._get_row(session, team_id))

    def list_teams(self) -> List[Team]:
        with self._session_factory() as session:
            rows = session.scalars(
                select(models.Team)
                .options(selectinload(models.Team.players))
                .order_by(models.Team.id)
            ).all()
            return [Team.model_validate(row) for row in rows]

    def delete(self, team_id: int) -> None:
        with self._session_factory() as session, session.begin():
            session.delete(self._get_row(session, team_id))
        logger.info("team_deleted", backend=self.backend, team_id=team_id)

    def _get_row(self, session: Session, team_id: int) -> models.Team:
        row = session.get(
            models.Team, team_id, options=[selectinload(models.Team.players)]
        )
        if row is None:
            raise TeamNotFoundError(team_id=team_id)
        return row

    def _sync_roster(self, row: models.Team, team: Team) -> None:
        # Inserts flush before deletes, so rows that survive a re-save must be
        # kept rather than recreated or the unique constraint trips.
        wanted = {(player.name, player.location) for player in team.players}
        row.players = [
            player for player in row.players if (player.name, player.location) in wanted
        ]
        existing = {(player.name, player.location) for player in row.players}
        for name, location in sorted(wanted - existing):
            row.players.append(models.Player(name=name, location=location))

"""Seed the entity store with the sample team and its roster."""
from __future__ import annotations

from typing import Optional

from teamhub.core.config import Settings, settings
from teamhub.core.exceptions import TeamNotFoundError
from teamhub.core.logging import configure_logging, get_logger
from teamhub.db.session import build_engine, build_session_factory, init_db, is_memory_database
from teamhub.schemas import Player, Team
from teamhub.store import SqlTeamStore, TeamStore

logger = get_logger(__name__)

SEED_PLAYERS = [
    {"name": "Dravid", "location": "Rajastan"},
    {"name": "Sachin", "location": "Mumbai"},
    {"name": "Kohli", "location": "Bangalore"},
]

SEED_TEAM = {"name": "India", "location": "IPL", "mascotte": None}


def build_seed_team() -> Team:
    players = {Player(**player_data) for player_data in SEED_PLAYERS}
    return Team(**SEED_TEAM, players=players)


def seed_store(store: TeamStore) -> int:
    """Save the sample team and return its id.

    Re-running against a store that already holds the team updates it in place.
    """
    team = build_seed_team()
    try:
        existing = store.find_by_name(team.name)
        team = team.model_copy(update={"id": existing.id})
    except TeamNotFoundError:
        pass
    team_id = store.save(team)
    logger.info(
        "store_seeded",
        backend=store.backend,
        team_id=team_id,
        team=team.name,
        players=len(team.players),
    )
    return team_id


def main(app_settings: Optional[Settings] = None) -> None:
    """Seed the SQL database at ``DATABASE_URL``, whatever ``STORE_BACKEND`` says.

    An in-memory database would vanish on exit, so it is refused.
    """
    app_settings = app_settings or settings
    configure_logging(app_settings.ENVIRONMENT, app_settings.LOG_LEVEL)
    if is_memory_database(app_settings.DATABASE_URL):
        logger.error(
            "seed_refused",
            reason="DATABASE_URL points at an in-memory database",
            database_url=app_settings.DATABASE_URL,
        )
        raise SystemExit(1)

    engine = build_engine(app_settings.DATABASE_URL)
    try:
        init_db(engine)
        seed_store(SqlTeamStore(build_session_factory(engine)))
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()

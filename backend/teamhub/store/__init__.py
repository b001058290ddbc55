"""Entity store backends."""
from teamhub.core.config import Settings
from teamhub.db.session import build_engine, build_session_factory, init_db
from teamhub.store.base import TeamStore
from teamhub.store.memory import InMemoryTeamStore
from teamhub.store.sql import SqlTeamStore


def build_store(settings: Settings) -> TeamStore:
    """Create the store selected by ``STORE_BACKEND``."""
    if settings.STORE_BACKEND == "sql":
        engine = build_engine(settings.DATABASE_URL)
        init_db(engine)
        return SqlTeamStore(build_session_factory(engine))
    return InMemoryTeamStore()


__all__ = ["InMemoryTeamStore", "SqlTeamStore", "TeamStore", "build_store"]

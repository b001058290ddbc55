# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Environment defaults are set before teamhub.core.config is imported, since
# settings are loaded at import time.
# =============================================================================

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.pop("REDIS_URL", None)

import pytest
from fastapi.testclient import TestClient

from teamhub.db.session import build_engine, build_session_factory, init_db
from teamhub.main import create_application
from teamhub.schemas import Player, Team
from teamhub.store import InMemoryTeamStore, SqlTeamStore


def make_sql_store() -> SqlTeamStore:
    engine = build_engine("sqlite+pysqlite:///:memory:")
    init_db(engine)
    return SqlTeamStore(build_session_factory(engine))


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(params=["memory", "sql"])
def store(request):
    """Each store backend, empty."""
    if request.param == "sql":
        return make_sql_store()
    return InMemoryTeamStore()


@pytest.fixture
def sample_team():
    return Team(
        name="Chennai",
        location="Chepauk",
        mascotte="Lion",
        players={
            Player(name="Dhoni", location="Ranchi"),
            Player(name="Jadeja", location="Jamnagar"),
        },
    )


@pytest.fixture(params=["memory", "sql"])
def client(request):
    """A client against a seeded application, once per store backend."""
    store = make_sql_store() if request.param == "sql" else InMemoryTeamStore()
    app = create_application(store=store)
    with TestClient(app) as test_client:
        yield test_client

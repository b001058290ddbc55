"""Tests for startup seeding."""

import pytest

from teamhub.bootstrap import build_seed_team, main, seed_store
from teamhub.core.config import Settings
from teamhub.db.session import build_engine, build_session_factory
from teamhub.schemas import Player
from teamhub.store import SqlTeamStore

SEEDED_PLAYERS = {
    Player(name="Dravid", location="Rajastan"),
    Player(name="Sachin", location="Mumbai"),
    Player(name="Kohli", location="Bangalore"),
}


def test_seed_team_literal_values():
    team = build_seed_team()

    assert team.name == "India"
    assert team.location == "IPL"
    assert team.mascotte is None
    assert team.players == SEEDED_PLAYERS


def test_seed_store_saves_team(store):
    team_id = seed_store(store)

    team = store.find_by_name("India")
    assert team.id == team_id
    assert team.location == "IPL"
    assert team.players == SEEDED_PLAYERS
    assert len(team.players) == 3


def test_seeding_twice_keeps_one_team(store):
    first = seed_store(store)
    second = seed_store(store)

    assert first == second
    assert len(store.list_teams()) == 1


def test_seed_command_writes_to_database_file(tmp_path):
    database_url = f"sqlite+pysqlite:///{tmp_path / 'teams.db'}"

    # STORE_BACKEND is "memory" in the test environment; the command ignores it
    main(Settings(DATABASE_URL=database_url))
    main(Settings(DATABASE_URL=database_url))

    engine = build_engine(database_url)
    try:
        store = SqlTeamStore(build_session_factory(engine))
        assert len(store.list_teams()) == 1
        assert store.find_by_name("India").players == SEEDED_PLAYERS
    finally:
        engine.dispose()


def test_seed_command_refuses_in_memory_database():
    with pytest.raises(SystemExit) as exc_info:
        main(Settings(DATABASE_URL="sqlite+pysqlite:///:memory:"))

    assert exc_info.value.code == 1

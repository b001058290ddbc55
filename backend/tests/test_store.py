"""Contract tests run against every store backend."""

import pytest

from teamhub.core.exceptions import TeamNotFoundError
from teamhub.schemas import Player, Team


def test_save_assigns_id(store, sample_team):
    team_id = store.save(sample_team)

    assert isinstance(team_id, int)
    assert store.find_by_id(team_id).name == "Chennai"


def test_ids_are_distinct(store, sample_team):
    first = store.save(sample_team)
    second = store.save(sample_team.model_copy(update={"name": "Kolkata"}))

    assert first != second


def test_find_by_name_returns_full_team(store, sample_team):
    team_id = store.save(sample_team)

    found = store.find_by_name("Chennai")

    assert found.id == team_id
    assert found.location == "Chepauk"
    assert found.mascotte == "Lion"
    assert found.players == sample_team.players


def test_find_by_name_is_exact_and_case_sensitive(store, sample_team):
    store.save(sample_team)

    with pytest.raises(TeamNotFoundError):
        store.find_by_name("chennai")
    with pytest.raises(TeamNotFoundError):
        store.find_by_name("Chen")


def test_find_by_name_missing(store):
    with pytest.raises(TeamNotFoundError) as exc_info:
        store.find_by_name("Unknown")
    assert exc_info.value.name == "Unknown"


def test_find_by_id_missing(store):
    with pytest.raises(TeamNotFoundError) as exc_info:
        store.find_by_id(999)
    assert exc_info.value.team_id == 999


def test_lowest_id_wins_for_shared_names(store, sample_team):
    first = store.save(sample_team)
    store.save(sample_team.model_copy(update={"location": "Elsewhere"}))

    assert store.find_by_name("Chennai").id == first


def test_resave_same_id_is_idempotent(store, sample_team):
    team_id = store.save(sample_team)
    stored = store.find_by_id(team_id)

    assert store.save(stored) == team_id
    assert store.save(stored) == team_id

    assert len(store.list_teams()) == 1
    assert store.find_by_id(team_id).players == sample_team.players


def test_resave_reflects_latest_values(store, sample_team):
    team_id = store.save(sample_team)
    updated = store.find_by_id(team_id).model_copy(
        update={
            "mascotte": "Whistle",
            "players": {
                Player(name="Dhoni", location="Ranchi"),
                Player(name="Gaikwad", location="Pune"),
            },
        }
    )

    store.save(updated)

    found = store.find_by_id(team_id)
    assert found.mascotte == "Whistle"
    assert found.players == {
        Player(name="Dhoni", location="Ranchi"),
        Player(name="Gaikwad", location="Pune"),
    }


def test_identical_players_stored_once(store):
    team = Team(
        name="India",
        location="IPL",
        players={
            Player(name="Sachin", location="Mumbai"),
            Player(name="Sachin", location="Mumbai"),
        },
    )

    team_id = store.save(team)

    assert len(store.find_by_id(team_id).players) == 1


def test_save_with_unknown_id_raises(store, sample_team):
    with pytest.raises(TeamNotFoundError):
        store.save(sample_team.model_copy(update={"id": 42}))
    assert store.list_teams() == []


def test_list_teams_in_id_order(store, sample_team):
    store.save(sample_team)
    store.save(sample_team.model_copy(update={"name": "Kolkata"}))

    assert [team.name for team in store.list_teams()] == ["Chennai", "Kolkata"]


def test_delete(store, sample_team):
    team_id = store.save(sample_team)

    store.delete(team_id)

    with pytest.raises(TeamNotFoundError):
        store.find_by_id(team_id)
    with pytest.raises(TeamNotFoundError):
        store.delete(team_id)


def test_list_players_spans_teams(store, sample_team):
    store.save(sample_team)
    store.save(
        Team(name="Mumbai", location="Wankhede", players={Player(name="Rohit", location="Nagpur")})
    )

    assert [player.name for player in store.list_players()] == ["Dhoni", "Jadeja", "Rohit"]


def test_returned_team_is_detached(store, sample_team):
    team_id = store.save(sample_team)

    found = store.find_by_id(team_id)
    found.players.add(Player(name="Intruder", location="Nowhere"))

    assert store.find_by_id(team_id).players == sample_team.players

"""
Tests for the in-memory player DAO.
"""

from ateliers import InMemoryPlayerDAO, Player, PlayerDAO


def names(dao):
    return [p.name for p in dao.list_players()]


def test_default_seed():
    dao = InMemoryPlayerDAO()

    assert isinstance(dao, PlayerDAO)
    assert names(dao) == ["Alice", "Bob", "Charlie"]
    assert all(p.cash == 1500 for p in dao.list_players())


def test_explicit_players():
    dao = InMemoryPlayerDAO([Player("Diana", 10)])
    assert names(dao) == ["Diana"]
    assert len(dao) == 1


def test_add_player_upserts():
    dao = InMemoryPlayerDAO([])
    dao.add_player(Player("Eve", 100))
    dao.add_player(Player("Eve", 250))

    assert names(dao) == ["Eve"]
    assert dao.get_player("Eve").cash == 250


def test_update_replaces_existing():
    dao = InMemoryPlayerDAO()
    dao.update_player(Player("Bob", 42))

    assert dao.get_player("Bob").cash == 42
    assert names(dao) == ["Alice", "Bob", "Charlie"]


def test_update_ignores_unknown():
    dao = InMemoryPlayerDAO()
    dao.update_player(Player("Zed", 1))

    assert "Zed" not in dao
    assert dao.get_player("Zed") is None


def test_delete_by_name():
    dao = InMemoryPlayerDAO()
    dao.delete_player(Player("Alice", 0))

    assert names(dao) == ["Bob", "Charlie"]


def test_delete_unknown_is_silent():
    dao = InMemoryPlayerDAO()
    dao.delete_player(Player("Zed", 0))

    assert names(dao) == ["Alice", "Bob", "Charlie"]


def test_list_is_a_copy():
    dao = InMemoryPlayerDAO()
    players = dao.list_players()
    players.clear()

    assert len(dao) == 3

"""
Tests for the player model, view and controller.
"""

import pytest
from pydantic import ValidationError

from ateliers import Player, PlayerController, PlayerView


def test_player_basics():
    player = Player("Alice", 1500)
    player.set_cash(10)
    player.add_cash(-25)

    assert player.get_cash() == -15
    assert player == Player("Alice", 0)
    assert player != Player("Bob", -15)
    with pytest.raises(AttributeError):
        player.name = "Bob"


def test_player_cash_changes_only_through_setters():
    player = Player("Alice", 1500)

    with pytest.raises(AttributeError):
        player.cash = 0

    player.add_cash(100)
    assert player.cash == player.get_cash() == 1600


def test_view_renders_card():
    view = PlayerView(write=lambda text: None)
    text = view.render(Player("Alice", 1500).to_card())

    assert text == "Player sheet:\nName: Alice\nCash: 1500 €"


def test_controller_updates_view():
    shown = []
    controller = PlayerController(Player("Alice", 1500), PlayerView(shown.append))

    controller.update_view()
    controller.add_cash(100)
    controller.update_view()

    assert shown[0].endswith("Cash: 1500 €")
    assert shown[1].endswith("Cash: 1600 €")
    assert controller.model.cash == 1600


def test_add_cash_has_no_bounds():
    controller = PlayerController(Player("Alice", 0), PlayerView(lambda text: None))
    controller.add_cash(-500)
    assert controller.model.cash == -500


def test_player_card_is_read_only():
    card = Player("Alice", 1500).to_card()
    with pytest.raises(ValidationError):
        card.cash = 0

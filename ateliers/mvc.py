"""
Model-view-controller triad for a player sheet.

The model is a Player, the view renders a PlayerCard, and the controller
moves data between them.
"""

from typing import Callable

from ateliers.player import Player
from ateliers.schemas import PlayerCard


class PlayerView:
    """Renders a player sheet as text."""

    def __init__(self, write: Callable[[str], None] = print):
        self.write = write

    def render(self, card: PlayerCard) -> str:
        return f"Player sheet:\nName: {card.name}\nCash: {card.cash} €"

    def show(self, card: PlayerCard) -> str:
        text = self.render(card)
        self.write(text)
        return text


class PlayerController:
    """Binds one player to one view."""

    def __init__(self, model: Player, view: PlayerView):
        self.model = model
        self.view = view

    def update_view(self) -> str:
        """Show the current state of the model. Returns the rendered text."""
        return self.view.show(self.model.to_card())

    def add_cash(self, amount: int) -> None:
        self.model.add_cash(amount)

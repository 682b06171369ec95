"""
Player state.
"""

from ateliers.schemas import PlayerCard


class Player:
    """
    A named player with a cash balance. Players are identified by name.

    `cash` is read-only; the balance changes through `set_cash` and
    `add_cash`.
    """

    def __init__(self, name: str, cash: int):
        self._name = name
        self._cash = cash

    @property
    def name(self) -> str:
        return self._name

    @property
    def cash(self) -> int:
        return self._cash

    def get_cash(self) -> int:
        return self._cash

    def set_cash(self, cash: int) -> None:
        self._cash = cash

    def add_cash(self, amount: int) -> None:
        """Add to the balance. Negative amounts withdraw; no bound checks."""
        self._cash += amount

    def to_card(self) -> PlayerCard:
        return PlayerCard(name=self._name, cash=self._cash)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self) -> str:
        return f"Player(name='{self._name}', cash={self._cash})"

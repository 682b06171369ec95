"""
Data access objects for players.

The store is in memory only and keyed by player name.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from ateliers.config import get_settings
from ateliers.player import Player

logger = logging.getLogger(__name__)

SEED_PLAYER_NAMES = ("Alice", "Bob", "Charlie")


class PlayerDAO(ABC):
    """
    Abstract player store.

    Implementations identify players by name.
    """

    @abstractmethod
    def list_players(self) -> List[Player]:
        """Return all players in insertion order."""

    @abstractmethod
    def get_player(self, name: str) -> Optional[Player]:
        """Return the player with this name, or None."""

    @abstractmethod
    def add_player(self, player: Player) -> None:
        """Insert a player, replacing any player with the same name."""

    @abstractmethod
    def update_player(self, player: Player) -> None:
        """Replace the stored player with the same name; unknown names are ignored."""

    @abstractmethod
    def delete_player(self, player: Player) -> None:
        """Remove the player with the same name; unknown names are ignored."""


class InMemoryPlayerDAO(PlayerDAO):
    """Player store backed by a dict."""

    def __init__(self, players: Optional[Iterable[Player]] = None):
        """
        Initialize the store.

        Args:
            players: Initial players. When omitted, Alice, Bob and Charlie
                are seeded with the configured starting cash.
        """
        if players is None:
            starting_cash = get_settings().starting_cash
            players = [Player(name, starting_cash) for name in SEED_PLAYER_NAMES]
        self._players: Dict[str, Player] = {}
        for player in players:
            self._players[player.name] = player

    def list_players(self) -> List[Player]:
        return list(self._players.values())

    def get_player(self, name: str) -> Optional[Player]:
        return self._players.get(name)

    def add_player(self, player: Player) -> None:
        self._players[player.name] = player
        logger.debug("Stored player %s", player.name)

    def update_player(self, player: Player) -> None:
        if player.name not in self._players:
            logger.debug("Update ignored, no player named %s", player.name)
            return
        self._players[player.name] = player

    def delete_player(self, player: Player) -> None:
        if self._players.pop(player.name, None) is None:
            logger.debug("Delete ignored, no player named %s", player.name)
        else:
            logger.debug("Deleted player %s", player.name)

    def __len__(self) -> int:
        return len(self._players)

    def __contains__(self, name: object) -> bool:
        return name in self._players

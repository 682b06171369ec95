"""
Demonstration routines, one per atelier.

Each routine writes its output through `write` (print by default).
"""

import argparse
import logging
from typing import Callable, List, Optional

from ateliers.bank import Bank, get_bank
from ateliers.board import create_demo_board
from ateliers.config import get_settings, normalize_log_level
from ateliers.dao import InMemoryPlayerDAO
from ateliers.mvc import PlayerController, PlayerView
from ateliers.player import Player
from ateliers.properties import BANK_OWNER, Property, PropertyFactory
from ateliers.rent import RentChain

Writer = Callable[[str], None]


def demo_rent_chain(write: Writer = print) -> None:
    write("\nRent chain:")
    chain = RentChain()
    visitor = Player("Alice", 1500)
    land = Property("Rue de la Paix", 400, BANK_OWNER)

    write("Test 1 - Land owned by the bank:")
    write(f"Rent due: {chain.compute_rent(land, visitor)}€")

    land.set_owner(visitor.name)
    write("\nTest 2 - Land owned by the player:")
    write(f"Rent due: {chain.compute_rent(land, visitor)}€")

    land.set_owner("Bob")
    land.mortgage()
    write("\nTest 3 - Mortgaged land:")
    write(f"Rent due: {chain.compute_rent(land, visitor)}€")

    land.unmortgage()
    land.set_house_count(1)
    write("\nTest 4 - Land with one house:")
    write(f"Rent due: {chain.compute_rent(land, visitor)}€")


def demo_singleton(write: Writer = print, bank_provider: Callable[[], Bank] = get_bank) -> None:
    write("\nShared bank:")
    first = bank_provider()
    first.set_cash(1000)
    write(f"Cash seen by first handle: {first.get_cash()}€")

    second = bank_provider()
    second.set_cash(500)
    write(f"Cash seen by second handle: {second.get_cash()}€")
    write(f"Cash seen by first handle: {first.get_cash()}€")
    write(f"Same instance: {first is second}")


def demo_factory(write: Writer = print) -> None:
    write("\nProperty factory:")
    factory = PropertyFactory()
    created = [
        factory.create("land", "Rue de la Paix", 400),
        factory.create("land", "Rue de Courcelles", 100),
        factory.create("station", "Montparnasse", 200),
    ]
    for prop in created:
        write(prop.describe())


def demo_iterator(write: Writer = print) -> None:
    write("\nBoard iterator:")
    for square in create_demo_board():
        write(square.describe())


def _write_players(dao: InMemoryPlayerDAO, write: Writer) -> None:
    for player in dao.list_players():
        write(f"{player.name}: {player.cash}€")


def demo_dao(write: Writer = print) -> None:
    write("\nPlayer DAO:")
    dao = InMemoryPlayerDAO()

    write("Initial players:")
    _write_players(dao, write)

    write("\nAdding 100€ to every player:")
    for player in dao.list_players():
        player.add_cash(100)
        dao.update_player(player)

    write("\nDeleting a player:")
    dao.delete_player(dao.list_players()[0])

    write("\nFinal players:")
    _write_players(dao, write)


def demo_mvc(write: Writer = print) -> None:
    write("\nMVC:")
    controller = PlayerController(Player("Alice", 1500), PlayerView(write))

    write("Initial state:")
    controller.update_view()

    write("\nAfter adding 100€:")
    controller.add_cash(100)
    controller.update_view()


def run_all(write: Writer = print, bank_provider: Callable[[], Bank] = get_bank) -> None:
    """Run every atelier, rent chain first."""
    demo_rent_chain(write)
    demo_singleton(write, bank_provider)
    demo_factory(write)
    demo_iterator(write)
    demo_dao(write)
    demo_mvc(write)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Run the Monopoly design-pattern ateliers"
    )
    parser.add_argument(
        "--log-level",
        type=normalize_log_level,
        default=None,
        help="Logging level (default: ATELIERS_LOG_LEVEL or WARNING)",
    )
    args = parser.parse_args(argv)

    level = args.log_level or get_settings().log_level
    logging.basicConfig(level=level)

    run_all()
    return 0

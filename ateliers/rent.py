"""
Rent calculation as a chain of responsibility.

The chain is an ordered tuple of rules. Each rule pairs a predicate with
an outcome; the first rule whose predicate holds decides the rent. The
default order is bank owner, same owner, mortgage, then house count.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence, Tuple

from ateliers.exceptions import InvalidHouseCountError
from ateliers.player import Player
from ateliers.properties import MAX_HOUSES, Property

logger = logging.getLogger(__name__)

HOUSE_RENT_TABLE: Tuple[int, ...] = (50, 150, 450, 1000, 2000)

# Returned when no rule applies. Only reachable with a custom rule list
# that lacks a terminal rule.
NO_RULE_RENT = 0


@dataclass(frozen=True)
class RentRule:
    """A single link of the chain."""

    name: str
    applies: Callable[[Property, Player], bool]
    amount: Callable[[Property, Player], int]


@dataclass(frozen=True)
class RentDecision:
    """Rent amount together with the rule that decided it."""

    amount: int
    rule: Optional[str]


def _no_rent(prop: Property, player: Player) -> int:
    return 0


def _always(prop: Property, player: Player) -> bool:
    return True


def _is_bank_owned(prop: Property, player: Player) -> bool:
    return prop.is_bank_owned


def _is_owned_by_visitor(prop: Property, player: Player) -> bool:
    return prop.owner == player.name


def _is_mortgaged(prop: Property, player: Player) -> bool:
    return prop.mortgaged


def house_rent(prop: Property, player: Player) -> int:
    """
    Rent from the house table, or base rent when nothing is built.

    Stations and utilities never have houses and always pay base rent.

    Raises:
        InvalidHouseCountError: If a land's house count is outside 0-5
    """
    if not prop.is_land:
        return prop.base_rent

    houses = prop.house_count
    if houses < 0 or houses > MAX_HOUSES:
        raise InvalidHouseCountError(houses)
    if houses > 0:
        return HOUSE_RENT_TABLE[houses - 1]
    return prop.base_rent


BANK_RULE = RentRule("bank_owned", _is_bank_owned, _no_rent)
OWNER_RULE = RentRule("same_owner", _is_owned_by_visitor, _no_rent)
MORTGAGE_RULE = RentRule("mortgaged", _is_mortgaged, _no_rent)
HOUSE_RULE = RentRule("house_count", _always, house_rent)

DEFAULT_RENT_RULES: Tuple[RentRule, ...] = (BANK_RULE, OWNER_RULE, MORTGAGE_RULE, HOUSE_RULE)


class RentChain:
    """
    Fixed pipeline of rent rules.

    The chain holds no state besides its rules and never mutates the
    property or the player, so one instance serves any number of
    computations.
    """

    def __init__(self, rules: Sequence[RentRule] = DEFAULT_RENT_RULES):
        self._rules: Tuple[RentRule, ...] = tuple(rules)

    @property
    def rule_names(self) -> Tuple[str, ...]:
        return tuple(rule.name for rule in self._rules)

    def explain(self, prop: Property, player: Player) -> RentDecision:
        """
        Run the chain and report which rule decided.

        Args:
            prop: Property the player landed on
            player: Visiting player

        Returns:
            RentDecision; `rule` is None when no rule applied
        """
        for rule in self._rules:
            if rule.applies(prop, player):
                amount = rule.amount(prop, player)
                logger.debug(
                    "Rent for %s on '%s' decided by %s: %d",
                    player.name,
                    prop.name,
                    rule.name,
                    amount,
                )
                return RentDecision(amount, rule.name)

        logger.warning(
            "No rent rule applied for %s on '%s'; charging %d",
            player.name,
            prop.name,
            NO_RULE_RENT,
        )
        return RentDecision(NO_RULE_RENT, None)

    def compute_rent(self, prop: Property, player: Player) -> int:
        """Rent owed by `player` for landing on `prop`."""
        return self.explain(prop, player).amount


_default_chain = RentChain()


def compute_rent(prop: Property, player: Player) -> int:
    """Compute rent with the default chain."""
    return _default_chain.compute_rent(prop, player)

"""
The bank as a shared context object.

Components that need the bank receive it as an argument. `get_bank()`
hands out the one instance used by the program entry point.
"""

import logging
from functools import lru_cache

from ateliers.config import get_settings

logger = logging.getLogger(__name__)


class Bank:
    """
    Holds the bank's cash. Single-threaded use only.

    `cash` is read-only; use `set_cash` to change it.
    """

    def __init__(self, cash: int = 0):
        self._cash = cash

    @property
    def cash(self) -> int:
        return self._cash

    def get_cash(self) -> int:
        return self._cash

    def set_cash(self, cash: int) -> None:
        self._cash = cash

    def __repr__(self) -> str:
        return f"Bank(cash={self._cash})"


@lru_cache
def get_bank() -> Bank:
    """
    Process-wide bank.

    Returns the same Bank on every call, seeded from settings on first use.
    """
    bank = Bank(get_settings().bank_cash)
    logger.debug("Created process bank with %d cash", bank.cash)
    return bank

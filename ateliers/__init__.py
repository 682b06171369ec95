"""
Monopoly Design-Pattern Ateliers

Six classic design patterns on a simplified Monopoly domain.
"""

from .bank import Bank, get_bank
from .board import Board, BoardIterator, Square, create_demo_board
from .config import AtelierSettings, get_settings
from .dao import InMemoryPlayerDAO, PlayerDAO
from .exceptions import AtelierError, InvalidHouseCountError, UnknownPropertyTypeError
from .mvc import PlayerController, PlayerView
from .player import Player
from .properties import BANK_OWNER, Property, PropertyFactory, PropertyKind, create_property
from .rent import RentChain, compute_rent

__all__ = [
    "Bank",
    "get_bank",
    "Board",
    "BoardIterator",
    "Square",
    "create_demo_board",
    "AtelierSettings",
    "get_settings",
    "InMemoryPlayerDAO",
    "PlayerDAO",
    "AtelierError",
    "InvalidHouseCountError",
    "UnknownPropertyTypeError",
    "PlayerController",
    "PlayerView",
    "Player",
    "BANK_OWNER",
    "Property",
    "PropertyFactory",
    "PropertyKind",
    "create_property",
    "RentChain",
    "compute_rent",
]

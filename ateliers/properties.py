"""
Ownable board assets and the factory that creates them.
"""

import logging
from enum import Enum
from typing import Union

from ateliers.exceptions import UnknownPropertyTypeError
from ateliers.schemas import PropertyCard

logger = logging.getLogger(__name__)

BANK_OWNER = "Bank"
MAX_HOUSES = 5
BASE_RENT_DIVISOR = 10


class PropertyKind(Enum):
    """Kinds of ownable properties."""

    LAND = "land"
    STATION = "station"
    UTILITY = "utility"

    @classmethod
    def parse(cls, tag: Union[str, "PropertyKind"]) -> "PropertyKind":
        """
        Resolve a type tag to a kind.

        Accepts the enum itself, the canonical tags and the French tags
        used on the original board ("terrain", "gare", "compagnie").

        Raises:
            UnknownPropertyTypeError: If the tag is not recognized
        """
        if isinstance(tag, cls):
            return tag
        if isinstance(tag, str):
            key = tag.strip().lower()
            for kind in cls:
                if kind.value == key:
                    return kind
            if key in _FRENCH_TAGS:
                return _FRENCH_TAGS[key]
        raise UnknownPropertyTypeError(tag)


_FRENCH_TAGS = {
    "terrain": PropertyKind.LAND,
    "gare": PropertyKind.STATION,
    "compagnie": PropertyKind.UTILITY,
}


def _base_rent(price: int) -> int:
    """10% of the price in integer arithmetic, truncated toward zero."""
    if price >= 0:
        return price // BASE_RENT_DIVISOR
    return -(-price // BASE_RENT_DIVISOR)


class Property:
    """
    An ownable asset: a land, a station or a utility.

    Name, price, kind and base rent are fixed at creation. Owner,
    mortgage flag and house count change through the setters below.
    """

    def __init__(
        self,
        name: str,
        price: int,
        owner: str = BANK_OWNER,
        kind: PropertyKind = PropertyKind.LAND,
    ):
        self._name = name
        self._price = price
        self._kind = kind
        self._base_rent = _base_rent(price)
        self.owner = owner
        self.mortgaged = False
        self.house_count = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def price(self) -> int:
        return self._price

    @property
    def kind(self) -> PropertyKind:
        return self._kind

    @property
    def base_rent(self) -> int:
        """Rent with no houses: 10% of the price, truncated."""
        return self._base_rent

    @property
    def is_land(self) -> bool:
        return self._kind is PropertyKind.LAND

    @property
    def is_bank_owned(self) -> bool:
        return self.owner == BANK_OWNER

    def set_owner(self, owner: str) -> None:
        self.owner = owner

    def mortgage(self) -> None:
        self.mortgaged = True

    def unmortgage(self) -> None:
        self.mortgaged = False

    def set_house_count(self, house_count: int) -> None:
        """
        Set the number of houses.

        The value is stored as given; the rent chain rejects counts
        outside the rent table. Only lands use it.
        """
        self.house_count = house_count

    def describe(self) -> str:
        """Human-readable one-line description."""
        if self._kind is PropertyKind.LAND:
            status = "mortgaged" if self.mortgaged else "not mortgaged"
            return (
                f"Land: {self._name} - Price: {self._price}€ - Owner: {self.owner} - "
                f"Status: {status} - Houses: {self.house_count}"
            )
        if self._kind is PropertyKind.STATION:
            return f"Station: {self._name} - Price: {self._price}€"
        return f"Utility: {self._name} - Price: {self._price}€"

    def to_card(self) -> PropertyCard:
        return PropertyCard(
            name=self._name,
            kind=self._kind.value,
            price=self._price,
            owner=self.owner,
            mortgaged=self.mortgaged,
            house_count=self.house_count,
            base_rent=self._base_rent,
        )

    def __repr__(self) -> str:
        return (
            f"Property(name='{self._name}', kind={self._kind.value}, price={self._price}, "
            f"owner='{self.owner}', mortgaged={self.mortgaged}, houses={self.house_count})"
        )


class PropertyFactory:
    """Creates bank-owned properties from a type tag."""

    def create(self, kind: Union[str, PropertyKind], name: str, price: int) -> Property:
        """
        Create a property of the given kind.

        Args:
            kind: Type tag ("land", "station", "utility") or PropertyKind
            name: Property name
            price: Purchase price

        Returns:
            A new bank-owned Property

        Raises:
            UnknownPropertyTypeError: If the tag is not recognized
        """
        property_kind = PropertyKind.parse(kind)
        logger.debug("Creating %s '%s' priced %d", property_kind.value, name, price)
        return Property(name, price, kind=property_kind)


_default_factory = PropertyFactory()


def create_property(kind: Union[str, PropertyKind], name: str, price: int) -> Property:
    """Create a property with the module's default factory."""
    return _default_factory.create(kind, name, price)

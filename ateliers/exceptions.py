"""
Custom exception hierarchy for the ateliers.

Only the property factory and the rent table can fail; every other
operation in the package is total.
"""


class AtelierError(Exception):
    """Base exception for all atelier errors."""


class UnknownPropertyTypeError(AtelierError, ValueError):
    """The property factory received a type tag it does not know."""

    def __init__(self, tag: object):
        self.tag = tag
        super().__init__(f"Unknown property type: {tag!r}")


class InvalidHouseCountError(AtelierError, ValueError):
    """A land's house count is outside the rent table."""

    def __init__(self, house_count: int):
        self.house_count = house_count
        super().__init__(f"House count must be between 0 and 5, got {house_count}")

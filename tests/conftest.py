"""Shared test fixtures for the ateliers."""

import pytest

from ateliers import Player, Property, PropertyFactory, RentChain


@pytest.fixture
def alice():
    """Visiting player."""
    return Player("Alice", 1500)


@pytest.fixture
def rue_de_la_paix():
    """Bank-owned land priced 400 (base rent 40)."""
    return Property("Rue de la Paix", 400)


@pytest.fixture
def bob_land(rue_de_la_paix):
    """Rue de la Paix owned by a third party, Bob."""
    rue_de_la_paix.set_owner("Bob")
    return rue_de_la_paix


@pytest.fixture
def chain():
    return RentChain()


@pytest.fixture
def factory():
    return PropertyFactory()

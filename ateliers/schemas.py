"""Read-only projections of the domain objects."""

from pydantic import BaseModel, ConfigDict


class PlayerCard(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    cash: int


class PropertyCard(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    kind: str
    price: int
    owner: str
    mortgaged: bool
    house_count: int
    base_rent: int

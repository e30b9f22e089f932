"""Domain models for the ingredient catalog and user fridges."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Ingredient:
    """Represents an entry of the static ingredient catalog."""

    id: int
    name: str


@dataclass(frozen=True)
class FridgeEntry:
    """Represents an ingredient stored in a user's fridge."""

    ingredient_id: int
    name: str
    quantity: str

"""Domain models for bookmarked recipes."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FavoriteRecipe:
    """Represents a bookmarked recipe as stored in the recipe catalog."""

    id: int
    title: str
    image: str | None

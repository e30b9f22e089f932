"""Recipe bookmarks."""

from dataclasses import dataclass, replace
from typing import Protocol

from recipe_accounts.domain.favorites import FavoriteRecipe


class FavoriteRepository(Protocol):
    """Persistence interface for favorite recipes."""

    def add(self, user_id: int, recipe_id: int) -> None:
        """Bookmark a recipe; an existing bookmark is left as is."""

    def remove(self, user_id: int, recipe_id: int) -> None:
        """Remove a bookmark if present."""

    def list_recipes(self, user_id: int) -> list[FavoriteRecipe]:
        """Return the user's bookmarked recipes."""

    def exists(self, user_id: int, recipe_id: int) -> bool:
        """Return True when the user has bookmarked the recipe."""


@dataclass
class FavoriteService:
    """Service for recipe bookmarks."""

    repository: FavoriteRepository
    image_base_url: str

    def add_favorite(self, user_id: int, recipe_id: int) -> None:
        """Bookmark a recipe for the user."""
        self.repository.add(user_id, recipe_id)

    def remove_favorite(self, user_id: int, recipe_id: int) -> None:
        """Remove a bookmark; removing a missing bookmark is not an error."""
        self.repository.remove(user_id, recipe_id)

    def list_favorites(self, user_id: int) -> list[FavoriteRecipe]:
        """Return bookmarked recipes with images as retrieval URLs."""
        return [
            replace(recipe, image=self.image_url(recipe.image))
            for recipe in self.repository.list_recipes(user_id)
        ]

    def is_favorited(self, user_id: int, recipe_id: int) -> bool:
        """Return True when the recipe is bookmarked by the user."""
        return self.repository.exists(user_id, recipe_id)

    def image_url(self, image: str | None) -> str | None:
        """Return the public URL for a recipe image filename."""
        if not image:
            return None
        return f"{self.image_base_url.rstrip('/')}/{image}"

"""Supabase repository for favorite recipes."""

from dataclasses import dataclass

from supabase import Client

from recipe_accounts.adapters.supabase_errors import translate_errors
from recipe_accounts.domain.favorites import FavoriteRecipe
from recipe_accounts.services.favorites import FavoriteRepository


@dataclass
class SupabaseFavoriteRepository(FavoriteRepository):
    """Supabase-backed favorites repository."""

    client: Client

    def add(self, user_id: int, recipe_id: int) -> None:
        """Insert a bookmark, ignoring an existing one."""
        with translate_errors("add_favorite"):
            self.client.table("favorite_recipes").upsert(
                {"user_id": user_id, "recipe_id": recipe_id},
                on_conflict="user_id,recipe_id",
                ignore_duplicates=True,
            ).execute()

    def remove(self, user_id: int, recipe_id: int) -> None:
        """Delete a bookmark if it exists."""
        with translate_errors("remove_favorite"):
            self.client.table("favorite_recipes").delete().eq("user_id", user_id).eq(
                "recipe_id", recipe_id
            ).execute()

    def list_recipes(self, user_id: int) -> list[FavoriteRecipe]:
        """Return bookmarked recipes joined with the recipe catalog."""
        with translate_errors("list_favorites"):
            response = (
                self.client.table("favorite_recipes")
                .select("recipe_id, recipes(id, title, image)")
                .eq("user_id", user_id)
                .order("created_at")
                .execute()
            )
        recipes = []
        for row in response.data or []:
            recipe = row.get("recipes")
            if not recipe:
                continue
            recipes.append(
                FavoriteRecipe(
                    id=int(recipe["id"]),
                    title=str(recipe["title"]),
                    image=recipe.get("image"),
                )
            )
        return recipes

    def exists(self, user_id: int, recipe_id: int) -> bool:
        """Return True when the bookmark row exists."""
        with translate_errors("is_favorited"):
            response = (
                self.client.table("favorite_recipes")
                .select("recipe_id")
                .eq("user_id", user_id)
                .eq("recipe_id", recipe_id)
                .limit(1)
                .execute()
            )
        return bool(response.data)

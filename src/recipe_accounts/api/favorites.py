"""Recipe bookmark endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status

from recipe_accounts.api.auth import require_user
from recipe_accounts.api.models import RecipeReference, WrappedRecipeRequest

if TYPE_CHECKING:
    from recipe_accounts.containers import AppContainer

router = APIRouter(tags=["favorites"])


@router.post("/bookmark_recipe", status_code=status.HTTP_201_CREATED)
def bookmark_recipe(
    body: WrappedRecipeRequest, request: Request, user_id: int = Depends(require_user)
) -> dict[str, str]:
    """Bookmark a recipe."""
    container: AppContainer = request.app.state.container
    container.favorite_service.add_favorite(user_id, body.data.recipeID)
    return {"message": "Recipe favorited successfully"}


@router.post("/unbookmark_recipe")
def unbookmark_recipe(
    body: WrappedRecipeRequest, request: Request, user_id: int = Depends(require_user)
) -> dict[str, str]:
    """Remove a bookmark, sent as ``{"data": {"recipeID": ...}}``."""
    container: AppContainer = request.app.state.container
    container.favorite_service.remove_favorite(user_id, body.data.recipeID)
    return {"message": "Recipe removed from favorites successfully"}


@router.delete("/unbookmark")
def unbookmark(
    body: RecipeReference, request: Request, user_id: int = Depends(require_user)
) -> dict[str, str]:
    """Remove a bookmark, sent as ``{"recipeID": ...}``."""
    container: AppContainer = request.app.state.container
    container.favorite_service.remove_favorite(user_id, body.recipeID)
    return {"message": "Recipe removed from favorites successfully"}


@router.get("/favorite_recipe")
def favorite_recipes(
    request: Request, user_id: int = Depends(require_user)
) -> dict[str, list[dict[str, object]]]:
    """Return the caller's bookmarked recipes with image URLs."""
    container: AppContainer = request.app.state.container
    recipes = container.favorite_service.list_favorites(user_id)
    return {
        "favoriteRecipes": [
            {"id": recipe.id, "title": recipe.title, "image": recipe.image}
            for recipe in recipes
        ]
    }


@router.post("/isBookmarked")
def is_bookmarked(
    body: WrappedRecipeRequest, request: Request, user_id: int = Depends(require_user)
) -> dict[str, int]:
    """Return ``{"full": 1}`` when the recipe is bookmarked, else ``{"full": 0}``."""
    container: AppContainer = request.app.state.container
    favorited = container.favorite_service.is_favorited(user_id, body.data.recipeID)
    return {"full": 1 if favorited else 0}

"""Ingredient catalog and fridge endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from recipe_accounts.api.auth import require_user
from recipe_accounts.api.models import FridgeEntryRequest, IngredientNameRequest
from recipe_accounts.domain.fridge import FridgeEntry

if TYPE_CHECKING:
    from recipe_accounts.containers import AppContainer

router = APIRouter(tags=["fridge"])


@router.get("/ingredient_options")
def ingredient_options(
    request: Request, query: str | None = None
) -> dict[str, list[str]]:
    """Return catalog ingredient names containing ``query``."""
    container: AppContainer = request.app.state.container
    return {"ingredientOptions": container.fridge_service.search_catalog(query)}


@router.post("/profile_ingredient_list")
def save_ingredient(
    body: FridgeEntryRequest, request: Request, user_id: int = Depends(require_user)
) -> dict[str, str]:
    """Add an ingredient to the caller's fridge or update its quantity."""
    container: AppContainer = request.app.state.container
    container.fridge_service.upsert_entry(user_id, body.name, body.quantity)
    return {"message": "Fridge updated successfully"}


@router.get("/saved_ingredients")
def saved_ingredients(
    request: Request, user_id: int = Depends(require_user)
) -> dict[str, list[dict[str, str]]]:
    """Return the caller's fridge."""
    container: AppContainer = request.app.state.container
    entries = container.fridge_service.list_entries(user_id)
    return {"savedIngredients": _serialize_entries(entries)}


@router.delete("/delete_ingredient")
def delete_ingredient(
    body: IngredientNameRequest, request: Request, user_id: int = Depends(require_user)
) -> dict[str, list[dict[str, str]]]:
    """Remove an ingredient from the caller's fridge."""
    container: AppContainer = request.app.state.container
    remaining = container.fridge_service.delete_entry(user_id, body.name)
    return {"savedIngredients": _serialize_entries(remaining)}


def _serialize_entries(entries: list[FridgeEntry]) -> list[dict[str, str]]:
    return [{"name": entry.name, "quantity": entry.quantity} for entry in entries]

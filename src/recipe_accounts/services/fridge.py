"""Services for the ingredient catalog and per-user fridge inventory."""

from dataclasses import dataclass
from typing import Protocol

from recipe_accounts.domain.fridge import FridgeEntry, Ingredient
from recipe_accounts.errors import NotFoundError, ValidationError


class FridgeRepository(Protocol):
    """Persistence interface for the catalog and fridge entries."""

    def search_catalog(self, query: str) -> list[Ingredient]:
        """Return catalog ingredients whose name contains the query, by id."""

    def upsert_entry(self, user_id: int, ingredient_id: int, quantity: str) -> None:
        """Create the entry or overwrite its quantity atomically."""

    def list_entries(self, user_id: int) -> list[FridgeEntry]:
        """Return the user's entries joined with ingredient names."""

    def delete_entry(self, user_id: int, ingredient_id: int) -> int:
        """Delete one entry and return the number of rows removed."""


@dataclass
class FridgeService:
    """Application service for fridge operations."""

    repository: FridgeRepository

    def search_catalog(self, query: str | None) -> list[str]:
        """Return catalog names matching a case-insensitive substring."""
        if query is None:
            raise ValidationError("query is required")
        matches = self.repository.search_catalog(query)
        if not matches:
            raise NotFoundError("Ingredient not found in our recipes.")
        return [ingredient.name for ingredient in matches]

    def upsert_entry(
        self, user_id: int, name: str | None, quantity: str | None
    ) -> Ingredient:
        """Add an ingredient to the fridge or update its quantity."""
        if not name or quantity is None or quantity == "":
            raise ValidationError("name and quantity are required")
        ingredient = self._resolve(name)
        self.repository.upsert_entry(user_id, ingredient.id, quantity)
        return ingredient

    def list_entries(self, user_id: int) -> list[FridgeEntry]:
        """Return the user's fridge, raising NotFoundError when it is empty."""
        entries = self.repository.list_entries(user_id)
        if not entries:
            raise NotFoundError("User profile not found.")
        return entries

    def delete_entry(self, user_id: int, name: str | None) -> list[FridgeEntry]:
        """Remove an ingredient from the fridge and return what remains."""
        if not name:
            raise ValidationError("name is required")
        ingredient = self._resolve(name)
        deleted = self.repository.delete_entry(user_id, ingredient.id)
        if deleted == 0:
            raise NotFoundError("Ingredient not found in user profile.")
        return self.repository.list_entries(user_id)

    def _resolve(self, name: str) -> Ingredient:
        """Resolve a name to the first catalog match."""
        # TODO: return a disambiguation error when several catalog names match.
        matches = self.repository.search_catalog(name)
        if not matches:
            raise NotFoundError("Ingredient not found.")
        return matches[0]

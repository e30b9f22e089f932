"""Supabase repository for the ingredient catalog and fridge entries."""

from dataclasses import dataclass

from supabase import Client

from recipe_accounts.adapters.supabase_errors import translate_errors
from recipe_accounts.domain.fridge import FridgeEntry, Ingredient
from recipe_accounts.services.fridge import FridgeRepository


@dataclass
class SupabaseFridgeRepository(FridgeRepository):
    """Supabase-backed fridge repository."""

    client: Client

    def search_catalog(self, query: str) -> list[Ingredient]:
        """Return catalog ingredients whose name contains the query."""
        with translate_errors("search_catalog"):
            response = (
                self.client.table("ingredients")
                .select("id, name")
                .ilike("name", substring_pattern(query))
                .order("id")
                .execute()
            )
        needle = query.lower()
        return [
            Ingredient(id=int(row["id"]), name=str(row["name"]))
            for row in response.data or []
            if needle in str(row["name"]).lower()
        ]

    def upsert_entry(self, user_id: int, ingredient_id: int, quantity: str) -> None:
        """Insert the entry or overwrite its quantity in one statement."""
        with translate_errors("upsert_fridge_entry"):
            self.client.table("fridge_ingredients").upsert(
                {
                    "user_id": user_id,
                    "ingredient_id": ingredient_id,
                    "quantity": quantity,
                },
                on_conflict="user_id,ingredient_id",
            ).execute()

    def list_entries(self, user_id: int) -> list[FridgeEntry]:
        """Return the user's fridge entries with ingredient names."""
        with translate_errors("list_fridge_entries"):
            response = (
                self.client.table("fridge_ingredients")
                .select("ingredient_id, quantity, ingredients(name)")
                .eq("user_id", user_id)
                .order("ingredient_id")
                .execute()
            )
        entries = []
        for row in response.data or []:
            ingredient = row.get("ingredients") or {}
            entries.append(
                FridgeEntry(
                    ingredient_id=int(row["ingredient_id"]),
                    name=str(ingredient.get("name", "")),
                    quantity=str(row.get("quantity", "")),
                )
            )
        return entries

    def delete_entry(self, user_id: int, ingredient_id: int) -> int:
        """Delete one fridge entry and return how many rows were removed."""
        with translate_errors("delete_fridge_entry"):
            response = (
                self.client.table("fridge_ingredients")
                .delete()
                .eq("user_id", user_id)
                .eq("ingredient_id", ingredient_id)
                .execute()
            )
        return len(response.data or [])


def substring_pattern(query: str) -> str:
    """Build an ILIKE pattern matching ``query`` as a literal substring."""
    # PostgREST rewrites "*" to "%"; it is sent as "_" and filtered afterwards.
    escaped = (
        query.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
        .replace("*", "_")
    )
    return f"%{escaped}%"

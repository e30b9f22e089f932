"""Supabase repository for health labels and dietary restrictions."""

from dataclasses import dataclass

from supabase import Client

from recipe_accounts.adapters.supabase_errors import translate_errors
from recipe_accounts.domain.preferences import HealthLabel
from recipe_accounts.services.preferences import PreferenceRepository


@dataclass
class SupabasePreferenceRepository(PreferenceRepository):
    """Supabase implementation for dietary preferences."""

    client: Client

    def replace_restrictions(self, user_id: int, label_ids: list[int]) -> None:
        """Replace the restriction set through a transactional SQL function."""
        with translate_errors("replace_dietary_restrictions"):
            self.client.rpc(
                "replace_dietary_restrictions",
                {"p_user_id": user_id, "p_label_ids": label_ids},
            ).execute()

    def list_user_labels(self, user_id: int) -> list[HealthLabel]:
        """Return the labels selected by a user."""
        with translate_errors("list_user_labels"):
            response = (
                self.client.table("dietary_restrictions")
                .select("health_labels(id, label)")
                .eq("user_id", user_id)
                .order("health_label_id")
                .execute()
            )
        return [
            _parse_label(row["health_labels"])
            for row in response.data or []
            if row.get("health_labels")
        ]

    def find_labels(self, names: list[str]) -> list[HealthLabel]:
        """Return catalog labels whose text is in ``names``."""
        with translate_errors("find_labels"):
            response = (
                self.client.table("health_labels")
                .select("id, label")
                .in_("label", names)
                .order("id")
                .execute()
            )
        return [_parse_label(row) for row in response.data or []]

    def list_labels(self) -> list[HealthLabel]:
        """Return the full label catalog."""
        with translate_errors("list_labels"):
            response = (
                self.client.table("health_labels")
                .select("id, label")
                .order("id")
                .execute()
            )
        return [_parse_label(row) for row in response.data or []]


def _parse_label(row: dict[str, object]) -> HealthLabel:
    return HealthLabel(id=int(row["id"]), label=str(row["label"]))

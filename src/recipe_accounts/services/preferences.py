"""Dietary restriction preferences."""

import logging
from dataclasses import dataclass
from typing import Protocol

from recipe_accounts.domain.preferences import HealthLabel

logger = logging.getLogger(__name__)


class PreferenceRepository(Protocol):
    """Persistence interface for health labels and user restrictions."""

    def replace_restrictions(self, user_id: int, label_ids: list[int]) -> None:
        """Replace the user's restriction set in a single transaction."""

    def list_user_labels(self, user_id: int) -> list[HealthLabel]:
        """Return the labels currently selected by the user."""

    def find_labels(self, names: list[str]) -> list[HealthLabel]:
        """Return catalog labels whose text is in ``names``."""

    def list_labels(self) -> list[HealthLabel]:
        """Return the full label catalog."""


def parse_label_names(raw: str) -> list[str]:
    """Split a comma-separated list of health label names."""
    return [chunk.strip() for chunk in raw.split(",") if chunk.strip()]


def normalize_label_ids(selected: int | list[int]) -> list[int]:
    """Turn a single id or a list of ids into a de-duplicated list."""
    if isinstance(selected, int):
        return [selected]
    return list(dict.fromkeys(selected))


@dataclass
class PreferenceService:
    """Service for reading and replacing dietary restrictions."""

    repository: PreferenceRepository

    def save_restrictions(self, user_id: int, selected: int | list[int]) -> list[int]:
        """Replace the user's restrictions with ``selected``."""
        label_ids = normalize_label_ids(selected)
        self.repository.replace_restrictions(user_id, label_ids)
        logger.info(
            "Saved %d dietary restrictions", len(label_ids), extra={"user_id": user_id}
        )
        return label_ids

    def get_user_labels(self, user_id: int) -> list[str]:
        """Return the label text of the user's restrictions."""
        return [label.label for label in self.repository.list_user_labels(user_id)]

    def resolve_label_ids(self, raw_names: str) -> list[int]:
        """Return catalog ids for a comma-separated list of label names."""
        names = parse_label_names(raw_names)
        if not names:
            return []
        return [label.id for label in self.repository.find_labels(names)]

    def list_all_labels(self) -> list[str]:
        """Return every label in the catalog."""
        return [label.label for label in self.repository.list_labels()]

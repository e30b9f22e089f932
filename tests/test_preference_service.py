"""Tests for dietary preference service."""

from recipe_accounts.services.preferences import (
    PreferenceService,
    normalize_label_ids,
    parse_label_names,
)
from tests.conftest import InMemoryPreferenceRepository


def test_normalize_label_ids() -> None:
    assert normalize_label_ids([]) == []
    assert normalize_label_ids(3) == [3]
    assert normalize_label_ids([5, 2, 5]) == [5, 2]


def test_parse_label_names() -> None:
    assert parse_label_names("") == []
    assert parse_label_names(" Vegan , ,Dairy-Free") == ["Vegan", "Dairy-Free"]


def test_save_replaces_whole_set() -> None:
    repository = InMemoryPreferenceRepository()
    service = PreferenceService(repository)

    service.save_restrictions(1, [2, 5])
    service.save_restrictions(1, [3])

    assert repository.restrictions[1] == [3]
    assert service.get_user_labels(1) == ["Gluten-Free"]


def test_save_single_id() -> None:
    repository = InMemoryPreferenceRepository()
    service = PreferenceService(repository)

    assert service.save_restrictions(1, 4) == [4]
    assert service.get_user_labels(1) == ["Dairy-Free"]


def test_save_empty_list_clears_restrictions() -> None:
    repository = InMemoryPreferenceRepository()
    service = PreferenceService(repository)
    service.save_restrictions(1, [1, 2])

    service.save_restrictions(1, [])

    assert service.get_user_labels(1) == []


def test_restrictions_are_per_user() -> None:
    service = PreferenceService(InMemoryPreferenceRepository())
    service.save_restrictions(1, [1])
    service.save_restrictions(2, [2])

    assert service.get_user_labels(1) == ["Vegan"]
    assert service.get_user_labels(2) == ["Vegetarian"]


def test_resolve_label_ids_from_csv() -> None:
    service = PreferenceService(InMemoryPreferenceRepository())

    assert service.resolve_label_ids("Vegan, Dairy-Free,,Unknown") == [1, 4]
    assert service.resolve_label_ids("") == []


def test_list_all_labels() -> None:
    service = PreferenceService(InMemoryPreferenceRepository())

    assert service.list_all_labels() == [
        "Vegan",
        "Vegetarian",
        "Gluten-Free",
        "Dairy-Free",
        "Peanut-Free",
    ]

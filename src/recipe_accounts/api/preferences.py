"""Dietary restriction endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from recipe_accounts.api.auth import require_user
from recipe_accounts.api.models import DietaryRestrictionsRequest

if TYPE_CHECKING:
    from recipe_accounts.containers import AppContainer

router = APIRouter(tags=["preferences"])


@router.post("/dietary_restrictions")
def save_dietary_restrictions(
    body: DietaryRestrictionsRequest,
    request: Request,
    user_id: int = Depends(require_user),
) -> dict[str, str]:
    """Replace the caller's dietary restrictions."""
    container: AppContainer = request.app.state.container
    container.preference_service.save_restrictions(user_id, body.selectedRestrictions)
    return {"message": "Dietary restrictions saved successfully"}


@router.get("/user_healthlabels")
def user_health_labels(
    request: Request, user_id: int = Depends(require_user)
) -> dict[str, list[str]]:
    """Return the label text of the caller's restrictions."""
    container: AppContainer = request.app.state.container
    return {"userHealthLabels": container.preference_service.get_user_labels(user_id)}


@router.get("/healthlabels_ids")
def health_label_ids(
    request: Request,
    selectedRestrictions: str,  # noqa: N803
) -> dict[str, list[int]]:
    """Resolve comma-separated label names to catalog ids."""
    container: AppContainer = request.app.state.container
    ids = container.preference_service.resolve_label_ids(selectedRestrictions)
    return {"healthLabelIds": ids}


@router.get("/healthlabels")
def health_labels(request: Request) -> dict[str, list[str]]:
    """Return every label for the selection checklist."""
    container: AppContainer = request.app.state.container
    return {"labels": container.preference_service.list_all_labels()}

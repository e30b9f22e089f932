"""Profile lookups and profile picture uploads."""

import logging
from dataclasses import dataclass
from typing import Protocol

from recipe_accounts.domain.users import UserProfile
from recipe_accounts.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for profile data."""

    def get_profile(self, user_id: int) -> UserProfile | None:
        """Return the profile for a user id, if present."""

    def set_profile_picture(self, user_id: int, reference: str) -> None:
        """Point the user's profile picture at a stored file."""


class PictureStorage(Protocol):
    """Content store for uploaded pictures."""

    def save(self, name: str, payload: bytes, content_type: str | None) -> None:
        """Store the payload under ``name``, replacing any existing file."""


def profile_picture_name(user_id: int) -> str:
    """Return the storage name for a user's single profile picture."""
    return f"{user_id}_profile_picture"


@dataclass
class ProfileService:
    """Service for reading profiles and replacing profile pictures."""

    repository: ProfileRepository
    storage: PictureStorage

    def get_profile(self, user_id: int) -> UserProfile:
        """Return the caller's profile."""
        profile = self.repository.get_profile(user_id)
        if profile is None:
            raise NotFoundError("User not found")
        return profile

    def upload_profile_picture(
        self, user_id: int, payload: bytes | None, content_type: str | None = None
    ) -> str:
        """Store a new profile picture and return its reference."""
        if not payload:
            raise ValidationError("No profile picture uploaded")
        name = profile_picture_name(user_id)
        self.storage.save(name, payload, content_type)
        self.repository.set_profile_picture(user_id, name)
        logger.info("Stored profile picture", extra={"user_id": user_id})
        return name

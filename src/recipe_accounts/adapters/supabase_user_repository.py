"""Supabase-backed user repository."""

from dataclasses import dataclass

from supabase import Client

from recipe_accounts.adapters.supabase_errors import translate_errors
from recipe_accounts.domain.users import UserCredentials, UserProfile
from recipe_accounts.errors import InternalError
from recipe_accounts.services.accounts import CredentialRepository
from recipe_accounts.services.profiles import ProfileRepository

_CREDENTIAL_COLUMNS = "id, username, email, password_hash, profile_picture"
_PROFILE_COLUMNS = "id, username, email, profile_picture"
_DUPLICATE_USER = "Username or email is already in use. Please choose a different one."


@dataclass
class SupabaseUserRepository(CredentialRepository, ProfileRepository):
    """Supabase implementation for credentials and profiles."""

    client: Client

    def create_user(
        self, username: str, email: str, password_hash: str
    ) -> UserCredentials:
        """Create a new user row and return it."""
        with translate_errors("create_user", conflict_message=_DUPLICATE_USER):
            response = (
                self.client.table("users")
                .insert(
                    {
                        "username": username,
                        "email": email,
                        "password_hash": password_hash,
                    }
                )
                .execute()
            )
        if not response.data:
            raise InternalError()
        return _parse_credentials(response.data[0])

    def get_by_username(self, username: str) -> UserCredentials | None:
        """Return the user for an exact username, if present."""
        with translate_errors("get_by_username"):
            response = (
                self.client.table("users")
                .select(_CREDENTIAL_COLUMNS)
                .eq("username", username)
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        return _parse_credentials(response.data[0])

    def get_profile(self, user_id: int) -> UserProfile | None:
        """Return the public profile for a user id, if present."""
        with translate_errors("get_profile"):
            response = (
                self.client.table("users")
                .select(_PROFILE_COLUMNS)
                .eq("id", user_id)
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        row = response.data[0]
        return UserProfile(
            id=int(row["id"]),
            username=str(row["username"]),
            email=str(row["email"]),
            profile_picture=row.get("profile_picture"),
        )

    def set_profile_picture(self, user_id: int, reference: str) -> None:
        """Update the profile picture reference for a user."""
        with translate_errors("set_profile_picture"):
            self.client.table("users").update({"profile_picture": reference}).eq(
                "id", user_id
            ).execute()


def _parse_credentials(row: dict[str, object]) -> UserCredentials:
    return UserCredentials(
        id=int(row["id"]),
        username=str(row["username"]),
        email=str(row["email"]),
        password_hash=str(row["password_hash"]),
        profile_picture=row.get("profile_picture"),
    )

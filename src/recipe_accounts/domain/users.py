"""Domain models for user accounts."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserProfile:
    """Public view of a user; never carries the password hash."""

    id: int
    username: str
    email: str
    profile_picture: str | None = None


@dataclass(frozen=True)
class UserCredentials:
    """Represents a user row including the stored password hash."""

    id: int
    username: str
    email: str
    password_hash: str
    profile_picture: str | None = None

    def to_profile(self) -> UserProfile:
        """Drop the hash and return the public profile."""
        return UserProfile(
            id=self.id,
            username=self.username,
            email=self.email,
            profile_picture=self.profile_picture,
        )

"""Registration and login."""

import logging
from dataclasses import dataclass, field
from typing import Protocol

from recipe_accounts.domain.users import UserCredentials, UserProfile
from recipe_accounts.errors import AuthenticationError, ValidationError
from recipe_accounts.services.tokens import TokenIssuer

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


class CredentialRepository(Protocol):
    """Persistence interface for usernames, emails and password hashes."""

    def create_user(
        self, username: str, email: str, password_hash: str
    ) -> UserCredentials:
        """Create a user row; raise ConflictError on a duplicate."""

    def get_by_username(self, username: str) -> UserCredentials | None:
        """Return the user with exactly this username, if present."""


class PasswordHasher(Protocol):
    """One-way salted password hashing."""

    def hash(self, password: str) -> str:
        """Return a salted hash of the password."""

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True when the password matches the hash."""


@dataclass
class AccountService:
    """Application service for registering users and issuing tokens."""

    repository: CredentialRepository
    hasher: PasswordHasher
    token_issuer: TokenIssuer
    _dummy_hash: str | None = field(default=None, init=False, repr=False)

    def register(
        self, username: str | None, email: str | None, password: str | None
    ) -> UserProfile:
        """Create a user and return it without the password hash."""
        if not username or not email or not password:
            raise ValidationError("Username, email, and password are required")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
            )
        created = self.repository.create_user(
            username=username,
            email=email,
            password_hash=self.hasher.hash(password),
        )
        logger.info("Registered user", extra={"user_id": created.id})
        return created.to_profile()

    def login(self, username: str | None, password: str | None) -> str:
        """Verify credentials and return a signed token.

        Unknown usernames and wrong passwords raise the same error.
        """
        if not username or not password:
            raise AuthenticationError()
        user = self.repository.get_by_username(username)
        if user is None:
            # Keep the unknown-user path as slow as a real comparison.
            self.hasher.verify(password, self._placeholder_hash())
            raise AuthenticationError()
        if not self.hasher.verify(password, user.password_hash):
            raise AuthenticationError()
        return self.token_issuer.issue(user.id)

    def _placeholder_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self.hasher.hash("placeholder-password")
        return self._dummy_hash

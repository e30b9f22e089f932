"""bcrypt-backed password hashing."""

from dataclasses import dataclass

import bcrypt

from recipe_accounts.services.accounts import PasswordHasher

# bcrypt only reads the first 72 bytes of a password.
_MAX_PASSWORD_BYTES = 72


@dataclass(frozen=True)
class BcryptPasswordHasher(PasswordHasher):
    """Salted bcrypt hashing with a fixed cost factor."""

    rounds: int = 10

    def hash(self, password: str) -> str:
        """Return a bcrypt hash for the password."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True when the password matches the stored hash."""
        return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:_MAX_PASSWORD_BYTES]

"""Signed identity tokens for authenticated sessions."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

import jwt

from recipe_accounts.errors import AuthenticationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenIssuer:
    """Issues and verifies time-limited JWTs that carry a user id."""

    secret: str
    algorithm: str = "HS256"
    ttl: timedelta = timedelta(hours=5)

    def issue(self, user_id: int, now: datetime | None = None) -> str:
        """Return a signed token for the user, valid for ``ttl``."""
        issued_at = now or datetime.now(tz=UTC)
        payload = {
            "sub": str(user_id),
            "userId": user_id,
            "iat": issued_at,
            "exp": issued_at + self.ttl,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> int:
        """Return the user id carried by a valid token.

        Raises AuthenticationError when the token is expired, tampered with
        or does not carry a numeric subject.
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError as exc:
            raise AuthenticationError("Token expired") from exc
        except jwt.PyJWTError as exc:
            logger.info("Rejected token: %s", exc)
            raise AuthenticationError("Invalid token") from exc
        subject = payload["sub"]
        if not isinstance(subject, str) or not subject.isdigit():
            raise AuthenticationError("Invalid token")
        return int(subject)

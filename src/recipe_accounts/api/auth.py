"""Authentication gate for protected endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Header, Request, Response

from recipe_accounts.errors import AuthenticationError

if TYPE_CHECKING:
    from recipe_accounts.containers import AppContainer

_BEARER_PREFIX = "bearer "


def require_user(
    request: Request, authorization: str | None = Header(default=None)
) -> int:
    """Return the authenticated user id or reject the request with 401."""
    container: AppContainer = request.app.state.container
    token = _bearer_token(authorization) or request.cookies.get(
        container.settings.session_cookie_name
    )
    if not token:
        raise AuthenticationError("Authentication required")
    return container.token_issuer.verify(token)


def set_session_cookie(
    response: Response, container: AppContainer, token: str
) -> None:
    """Attach the token as an http-only session cookie."""
    settings = container.settings
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        max_age=int(container.token_issuer.ttl.total_seconds()),
    )


def clear_session_cookie(response: Response, container: AppContainer) -> None:
    """Expire the session cookie on the client."""
    response.delete_cookie(key=container.settings.session_cookie_name)


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization or not authorization.lower().startswith(_BEARER_PREFIX):
        return None
    return authorization[len(_BEARER_PREFIX) :].strip() or None

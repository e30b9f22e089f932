"""Registration, login and profile endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, File, Request, Response, UploadFile, status

from recipe_accounts.api.auth import (
    clear_session_cookie,
    require_user,
    set_session_cookie,
)
from recipe_accounts.api.models import LoginRequest, RegisterRequest

if TYPE_CHECKING:
    from recipe_accounts.containers import AppContainer

router = APIRouter(tags=["accounts"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, request: Request) -> dict[str, object]:
    """Create a user account."""
    container: AppContainer = request.app.state.container
    user = container.account_service.register(
        username=body.username, email=body.email, password=body.password
    )
    return {
        "user": {
            "id": user.id,
            "username": user.username,
            "email": user.email,
            "profilePicture": user.profile_picture,
        }
    }


@router.post("/login")
def login(body: LoginRequest, request: Request, response: Response) -> dict[str, str]:
    """Verify credentials and return a signed token."""
    container: AppContainer = request.app.state.container
    token = container.account_service.login(body.username, body.password)
    set_session_cookie(response, container, token)
    return {"message": "Login successful", "token": token}


@router.post("/logout")
def logout(
    request: Request, response: Response, _user_id: int = Depends(require_user)
) -> dict[str, str]:
    """Clear the session cookie."""
    container: AppContainer = request.app.state.container
    clear_session_cookie(response, container)
    return {"message": "Logout successful"}


@router.get("/profile")
def profile(
    request: Request, user_id: int = Depends(require_user)
) -> dict[str, object]:
    """Return the caller's profile."""
    container: AppContainer = request.app.state.container
    user = container.profile_service.get_profile(user_id)
    return {
        "username": user.username,
        "email": user.email,
        "profilePicture": user.profile_picture,
    }


@router.post("/upload_profile_picture")
def upload_profile_picture(
    request: Request,
    profilePicture: UploadFile | None = File(default=None),  # noqa: N803
    user_id: int = Depends(require_user),
) -> dict[str, str]:
    """Replace the caller's profile picture."""
    container: AppContainer = request.app.state.container
    payload = profilePicture.file.read() if profilePicture else None
    name = container.profile_service.upload_profile_picture(
        user_id,
        payload,
        content_type=profilePicture.content_type if profilePicture else None,
    )
    return {"message": "Profile Picture uploaded successfully", "filePath": name}

"""
Authentication routes for signup, signin, signout and the current user.
"""
from typing import Optional
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session
from tripboard.api.dependencies import get_current_user_optional, get_session_token, get_settings
from tripboard.core.config import Settings
from tripboard.db.session import get_db
from tripboard.models.user import User
from tripboard.schemas.user import AuthRequest, AuthResponse, UserResponse
from tripboard.services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


def set_session_cookie(response: Response, token: str, settings: Settings):
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=token,
        max_age=settings.session_max_age,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax"
    )


def clear_session_cookie(response: Response, settings: Settings):
    response.delete_cookie(
        key=settings.SESSION_COOKIE_NAME,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax"
    )


@router.post("", response_model=AuthResponse)
async def authenticate(
    body: AuthRequest,
    response: Response,
    token: Optional[str] = Depends(get_session_token),
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db)
):
    """Sign up, sign in or sign out depending on ``action``."""
    if body.action == "signout":
        auth_service.revoke_session(token, db, settings=settings)
        clear_session_cookie(response, settings)
        return AuthResponse(user=None)

    if body.action == "signup":
        user = auth_service.create_account(body.email, body.password, db, name=body.name)
    else:
        user = auth_service.verify_credentials(body.email, body.password, db)

    set_session_cookie(response, auth_service.issue_session(user.id, settings=settings), settings)
    return AuthResponse(user=UserResponse.model_validate(user))


@router.get("", response_model=AuthResponse)
async def current_user(current_user: Optional[User] = Depends(get_current_user_optional)):
    """Return the signed-in user, or null."""
    if current_user is None:
        return AuthResponse(user=None)
    return AuthResponse(user=UserResponse.model_validate(current_user))

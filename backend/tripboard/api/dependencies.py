"""
Shared FastAPI dependencies for settings and the current user.
"""
from typing import Annotated, Optional
from fastapi import Depends, Path, Request
from sqlalchemy.orm import Session
from tripboard.core.config import Settings
from tripboard.core.errors import UnauthorizedError
from tripboard.db.session import get_db
from tripboard.models.user import User
from tripboard.schemas.common import MAX_ID
from tripboard.services.auth_service import resolve_session

# Path ids outside the key range fail validation instead of reaching the driver
TripId = Annotated[int, Path(ge=1, le=MAX_ID)]
ActivityId = Annotated[int, Path(ge=1, le=MAX_ID)]


def get_settings(request: Request) -> Settings:
    """Settings the application was built with."""
    return request.app.state.settings


def get_session_token(
    request: Request,
    settings: Settings = Depends(get_settings)
) -> Optional[str]:
    return request.cookies.get(settings.SESSION_COOKIE_NAME)


def get_current_user_optional(
    token: Optional[str] = Depends(get_session_token),
    settings: Settings = Depends(get_settings),
    db: Session = Depends(get_db)
) -> Optional[User]:
    """Current user, or None for anonymous requests."""
    user_id = resolve_session(token, db, settings=settings)
    if user_id is None:
        return None
    return db.get(User, user_id)


def get_current_user(
    current_user: Optional[User] = Depends(get_current_user_optional)
) -> User:
    """Current user. Raises UnauthorizedError for anonymous requests."""
    if current_user is None:
        raise UnauthorizedError()
    return current_user

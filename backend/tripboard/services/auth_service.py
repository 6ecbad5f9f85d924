"""
Auth service: account creation, credential checks and session lifecycle.
"""
from datetime import datetime
from typing import Optional
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from tripboard.core.config import Settings, settings as default_settings
from tripboard.core.errors import EmailAlreadyExistsError, InvalidCredentialsError
from tripboard.core.security import (
    DUMMY_PASSWORD_HASH, create_session_token, decode_session_token,
    get_password_hash, verify_password,
)
from tripboard.models.session import RevokedSession
from tripboard.models.user import User

logger = logging.getLogger(__name__)


def get_user_by_email(email: str, db: Session) -> Optional[User]:
    """Exact, case-sensitive email lookup."""
    return db.query(User).filter(User.email == email).first()


def create_account(email: str, password: str, db: Session, name: Optional[str] = None) -> User:
    """Register a new user. Raises EmailAlreadyExistsError on a taken email."""
    if get_user_by_email(email, db):
        raise EmailAlreadyExistsError()

    user = User(
        email=email,
        hashed_password=get_password_hash(password),
        name=name
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Concurrent signup won the unique constraint
        db.rollback()
        raise EmailAlreadyExistsError()
    db.refresh(user)

    logger.info(f"Created account {user.id}")
    return user


def verify_credentials(email: str, password: str, db: Session) -> User:
    """
    Return the user for a correct email/password pair.

    Unknown email and wrong password raise the same InvalidCredentialsError,
    and both paths run one bcrypt check.
    """
    user = get_user_by_email(email, db)
    if not user:
        verify_password(password, DUMMY_PASSWORD_HASH)
        raise InvalidCredentialsError()
    if not verify_password(password, user.hashed_password):
        raise InvalidCredentialsError()
    return user


def issue_session(user_id: int, settings: Settings = default_settings) -> str:
    """Issue a session token for the user."""
    return create_session_token(user_id, settings=settings)


def resolve_session(token: Optional[str], db: Session, settings: Settings = default_settings) -> Optional[int]:
    """
    Map a session token to a user id.

    Absent, malformed, expired or revoked tokens, and tokens for users that
    no longer exist, resolve to None (anonymous).
    """
    if not token:
        return None

    payload = decode_session_token(token, settings=settings)
    if not payload:
        return None

    revoked = db.query(RevokedSession).filter(RevokedSession.jti == payload["jti"]).first()
    if revoked:
        return None

    user_id = payload["user_id"]
    if db.get(User, user_id) is None:
        return None
    return user_id


def revoke_session(token: Optional[str], db: Session, settings: Settings = default_settings) -> None:
    """
    Revoke a session token so it no longer resolves. Invalid tokens are ignored.

    Rows for tokens that have expired on their own are dropped in the same
    transaction.
    """
    if not token:
        return

    payload = decode_session_token(token, settings=settings)
    if not payload:
        return

    _delete_expired_revocations(db)

    exists = db.query(RevokedSession).filter(RevokedSession.jti == payload["jti"]).first()
    if not exists:
        db.add(RevokedSession(
            jti=payload["jti"],
            user_id=payload["user_id"],
            expires_at=datetime.utcfromtimestamp(payload["exp"])
        ))
    db.commit()
    logger.info(f"Revoked session for user {payload['user_id']}")


def _delete_expired_revocations(db: Session) -> int:
    return db.query(RevokedSession).filter(
        RevokedSession.expires_at < datetime.utcnow()
    ).delete(synchronize_session=False)


def purge_expired_revocations(db: Session) -> int:
    """Delete revocation rows whose tokens have expired anyway."""
    deleted = _delete_expired_revocations(db)
    db.commit()
    return deleted

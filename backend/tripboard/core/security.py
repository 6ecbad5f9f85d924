"""
Security utilities for session tokens and password hashing.
"""
from datetime import datetime, timedelta
from typing import Optional
import hashlib
import secrets
import bcrypt
from jose import JWTError, jwt
from tripboard.core.config import Settings, settings as default_settings


def _pre_hash_password(password: str) -> bytes:
    """
    Pre-hash password with SHA256 to support passwords longer than 72 bytes.
    Returns bytes (32 bytes) which is well under bcrypt's 72-byte limit.
    """
    return hashlib.sha256(password.encode('utf-8')).digest()


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    pre_hashed = _pre_hash_password(plain_password)
    # hashed_password is a string starting with $2b$
    return bcrypt.checkpw(pre_hashed, hashed_password.encode('utf-8'))


def get_password_hash(password: str) -> str:
    """
    Hash a password with a fresh bcrypt salt.
    Pre-hashes with SHA256 first to support longer passwords.
    """
    pre_hashed = _pre_hash_password(password)
    salt = bcrypt.gensalt()
    hashed = bcrypt.hashpw(pre_hashed, salt)
    return hashed.decode('utf-8')


# Checked against when the email is unknown so both login failures pay for a bcrypt round.
DUMMY_PASSWORD_HASH = get_password_hash(secrets.token_urlsafe(16))


def create_session_token(
    user_id: int,
    expires_delta: Optional[timedelta] = None,
    settings: Settings = default_settings
) -> str:
    """Create a session token signed with ``settings.SECRET_KEY``."""
    if expires_delta:
        expire = datetime.utcnow() + expires_delta
    else:
        expire = datetime.utcnow() + timedelta(days=settings.SESSION_EXPIRE_DAYS)
    to_encode = {
        "sub": str(user_id),
        "user_id": user_id,
        "jti": secrets.token_urlsafe(16),
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_session_token(token: str, settings: Settings = default_settings) -> Optional[dict]:
    """Decode and verify a session token. Returns None if invalid or expired."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None
    if not isinstance(payload.get("user_id"), int) or not payload.get("jti"):
        return None
    return payload

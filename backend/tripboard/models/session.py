"""
Revoked session model for server-side sign-out.
"""
from sqlalchemy import Column, String, DateTime, ForeignKey, Integer
from tripboard.db.base import BaseModel


class RevokedSession(BaseModel):
    """Session token id that must no longer resolve to a user."""
    __tablename__ = "revoked_sessions"

    jti = Column(String(64), unique=True, nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    expires_at = Column(DateTime, nullable=False)  # Rows past this are safe to purge

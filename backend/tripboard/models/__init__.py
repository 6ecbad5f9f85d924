"""Models package - Import all models for SQLAlchemy registration."""
from tripboard.models.user import User
from tripboard.models.trip import Trip, DailyActivity
from tripboard.models.session import RevokedSession

__all__ = [
    "User",
    "Trip",
    "DailyActivity",
    "RevokedSession",
]

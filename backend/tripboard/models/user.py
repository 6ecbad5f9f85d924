"""
User model for authentication.
"""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from tripboard.db.base import BaseModel


class User(BaseModel):
    """User model. Email is matched exactly, case included."""
    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    hashed_password = Column(String(255), nullable=False)
    name = Column(String(100), nullable=True)

    # Relationships
    trips = relationship("Trip", back_populates="owner")

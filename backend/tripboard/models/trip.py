"""
Trip and daily activity models.
"""
from sqlalchemy import Column, String, Date, Time, Text, JSON, ForeignKey, Integer
from sqlalchemy.orm import relationship
from tripboard.db.base import BaseModel


class Trip(BaseModel):
    """Trip model owned by exactly one user."""
    __tablename__ = "trips"

    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    start_date = Column(Date, nullable=False, index=True)
    end_date = Column(Date, nullable=False, index=True)
    location = Column(String(255), nullable=False)
    tags = Column(JSON, nullable=False, default=list)  # Ordered list of free-text tags
    image_url = Column(String(500), nullable=True)
    general_description = Column(Text, nullable=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    # Relationships
    owner = relationship("User", back_populates="trips")
    daily_activities = relationship(
        "DailyActivity",
        back_populates="trip",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="[DailyActivity.date, DailyActivity.created_at, DailyActivity.id]",
    )


class DailyActivity(BaseModel):
    """A planned activity on one date of a trip."""
    __tablename__ = "daily_activities"

    trip_id = Column(Integer, ForeignKey("trips.id", ondelete="CASCADE"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=False)
    location = Column(String(255), nullable=False)
    time = Column(Time, nullable=True)  # Optional time of day
    notes = Column(Text, nullable=True)
    tags = Column(JSON, nullable=False, default=list)

    # Relationships
    trip = relationship("Trip", back_populates="daily_activities")

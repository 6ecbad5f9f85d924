"""
Trip service for trip-related business logic.
"""
from datetime import date
from typing import List, Optional
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from tripboard.core.errors import NotFoundError, ValidationError
from tripboard.models.trip import Trip
from tripboard.schemas.trip import TripCreate, TripUpdate
from tripboard.services.ownership import authorize_trip_mutation

logger = logging.getLogger(__name__)


def _trips_query(db: Session):
    return db.query(Trip).options(selectinload(Trip.daily_activities))


def create_trip(owner_id: int, trip_data: TripCreate, db: Session) -> Trip:
    """Create a trip owned by ``owner_id``."""
    trip = Trip(
        title=trip_data.title,
        description=trip_data.description,
        start_date=trip_data.start_date,
        end_date=trip_data.end_date,
        location=trip_data.location,
        tags=list(trip_data.tags),
        image_url=trip_data.image_url,
        general_description=trip_data.general_description,
        user_id=owner_id
    )
    db.add(trip)
    db.commit()
    db.refresh(trip)

    logger.info(f"User {owner_id} created trip {trip.id}")
    return trip


def get_trip(trip_id: int, db: Session) -> Trip:
    """Get a trip with its activities."""
    trip = _trips_query(db).filter(Trip.id == trip_id).first()
    if not trip:
        raise NotFoundError("Trip not found")
    return trip


def list_trips_by_owner(owner_id: int, db: Session) -> List[Trip]:
    """List a user's trips, newest first."""
    return _trips_query(db).filter(
        Trip.user_id == owner_id
    ).order_by(Trip.created_at.desc(), Trip.id.desc()).all()


def list_all_trips(db: Session) -> List[Trip]:
    """List every trip in the system, newest first."""
    return _trips_query(db).order_by(Trip.created_at.desc(), Trip.id.desc()).all()


def check_activity_dates(trip: Trip, start_date: date, end_date: date):
    """Validate a date range for a trip against its existing activities."""
    if end_date < start_date:
        raise ValidationError("endDate must not be before startDate")

    outside = [a for a in trip.daily_activities if not start_date <= a.date <= end_date]
    if outside:
        raise ValidationError(
            f"{len(outside)} activities fall outside {start_date.isoformat()} - {end_date.isoformat()}"
        )


def update_trip(trip_id: int, requester_id: Optional[int], trip_data: TripUpdate, db: Session) -> Trip:
    """Update only the provided fields of a trip."""
    trip = authorize_trip_mutation(trip_id, requester_id, db)
    changes = trip_data.model_dump(exclude_unset=True)

    if "start_date" in changes or "end_date" in changes:
        check_activity_dates(
            trip,
            changes.get("start_date", trip.start_date),
            changes.get("end_date", trip.end_date)
        )

    for field, value in changes.items():
        setattr(trip, field, value)

    db.commit()
    db.refresh(trip)

    logger.info(f"User {requester_id} updated trip {trip_id}: {sorted(changes)}")
    return trip


def delete_trip(trip_id: int, requester_id: Optional[int], db: Session):
    """Delete a trip and all of its activities in one transaction."""
    trip = authorize_trip_mutation(trip_id, requester_id, db)
    activity_count = len(trip.daily_activities)

    try:
        db.delete(trip)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.error(f"Failed to delete trip {trip_id}", exc_info=True)
        raise

    logger.info(f"User {requester_id} deleted trip {trip_id} with {activity_count} activities")

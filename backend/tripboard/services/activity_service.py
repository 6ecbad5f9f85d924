"""
Daily activity service. Every mutation is authorized through the parent trip.
"""
from datetime import date
from typing import List, Optional
import logging
from sqlalchemy.orm import Session
from tripboard.core.errors import NotFoundError, ValidationError
from tripboard.models.trip import DailyActivity, Trip
from tripboard.schemas.trip import ActivityCreate, ActivityUpdate
from tripboard.services.ownership import authorize_trip_mutation

logger = logging.getLogger(__name__)


def _check_within_trip(activity_date: date, trip: Trip):
    if not trip.start_date <= activity_date <= trip.end_date:
        raise ValidationError(
            f"Activity date {activity_date.isoformat()} is outside the trip "
            f"({trip.start_date.isoformat()} - {trip.end_date.isoformat()})"
        )


def _get_owned_activity(
    activity_id: int,
    requester_id: Optional[int],
    db: Session,
    trip_id: Optional[int] = None
) -> DailyActivity:
    """Resolve an activity and authorize the requester against its parent trip."""
    if trip_id is not None:
        # Surfaces a missing or foreign parent trip before looking at the activity
        authorize_trip_mutation(trip_id, requester_id, db)

    activity = db.get(DailyActivity, activity_id)
    if not activity or (trip_id is not None and activity.trip_id != trip_id):
        raise NotFoundError("Activity not found")

    authorize_trip_mutation(activity.trip_id, requester_id, db)
    return activity


def list_activities(trip_id: int, db: Session) -> List[DailyActivity]:
    """List a trip's activities ordered by date then creation."""
    if db.get(Trip, trip_id) is None:
        raise NotFoundError("Trip not found")
    return db.query(DailyActivity).filter(
        DailyActivity.trip_id == trip_id
    ).order_by(DailyActivity.date, DailyActivity.created_at, DailyActivity.id).all()


def get_activity(trip_id: int, activity_id: int, db: Session) -> DailyActivity:
    activity = db.query(DailyActivity).filter(
        DailyActivity.id == activity_id,
        DailyActivity.trip_id == trip_id
    ).first()
    if not activity:
        raise NotFoundError("Activity not found")
    return activity


def create_activity(
    trip_id: int,
    requester_id: Optional[int],
    activity_data: ActivityCreate,
    db: Session
) -> DailyActivity:
    """Create an activity on one of the requester's trips."""
    trip = authorize_trip_mutation(trip_id, requester_id, db)
    _check_within_trip(activity_data.date, trip)

    activity = DailyActivity(
        trip_id=trip.id,
        date=activity_data.date,
        title=activity_data.title,
        description=activity_data.description,
        location=activity_data.location,
        time=activity_data.time,
        notes=activity_data.notes,
        tags=list(activity_data.tags)
    )
    db.add(activity)
    db.commit()
    db.refresh(activity)

    logger.info(f"User {requester_id} added activity {activity.id} to trip {trip_id}")
    return activity


def update_activity(
    activity_id: int,
    requester_id: Optional[int],
    activity_data: ActivityUpdate,
    db: Session,
    trip_id: Optional[int] = None
) -> DailyActivity:
    """Update only the provided fields of an activity."""
    activity = _get_owned_activity(activity_id, requester_id, db, trip_id)
    changes = activity_data.model_dump(exclude_unset=True, exclude={"id"})

    if "date" in changes:
        _check_within_trip(changes["date"], activity.trip)

    for field, value in changes.items():
        setattr(activity, field, value)

    db.commit()
    db.refresh(activity)
    return activity


def delete_activity(
    activity_id: int,
    requester_id: Optional[int],
    db: Session,
    trip_id: Optional[int] = None
):
    """Delete an activity."""
    activity = _get_owned_activity(activity_id, requester_id, db, trip_id)
    db.delete(activity)
    db.commit()

    logger.info(f"User {requester_id} deleted activity {activity_id}")

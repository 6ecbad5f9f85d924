"""
Daily activity routes, nested under a trip.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from tripboard.api.dependencies import ActivityId, TripId, get_current_user
from tripboard.db.session import get_db
from tripboard.models.user import User
from tripboard.schemas.common import SuccessResponse
from tripboard.schemas.trip import (
    ActivityCreate, ActivityUpdate, ActivityDelete,
    ActivityResponse, ActivityEnvelope, ActivityListEnvelope
)
from tripboard.services import activity_service

router = APIRouter(prefix="/trips/{trip_id}/activities", tags=["activities"])


@router.get("", response_model=ActivityListEnvelope)
async def list_activities(trip_id: TripId, db: Session = Depends(get_db)):
    """List a trip's activities."""
    activities = activity_service.list_activities(trip_id, db)
    return ActivityListEnvelope(activities=[ActivityResponse.model_validate(a) for a in activities])


@router.get("/{activity_id}", response_model=ActivityEnvelope)
async def get_activity(trip_id: TripId, activity_id: ActivityId, db: Session = Depends(get_db)):
    """Get a single activity of a trip."""
    activity = activity_service.get_activity(trip_id, activity_id, db)
    return ActivityEnvelope(activity=ActivityResponse.model_validate(activity))


@router.post("", response_model=ActivityEnvelope, status_code=status.HTTP_201_CREATED)
async def create_activity(
    trip_id: TripId,
    activity_data: ActivityCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Add an activity to a trip. Trip owner only."""
    activity = activity_service.create_activity(trip_id, current_user.id, activity_data, db)
    return ActivityEnvelope(activity=ActivityResponse.model_validate(activity))


@router.put("", response_model=ActivityEnvelope)
async def update_activity(
    trip_id: TripId,
    activity_data: ActivityUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update the activity identified by ``id`` in the body. Trip owner only."""
    activity = activity_service.update_activity(
        activity_data.id, current_user.id, activity_data, db, trip_id=trip_id
    )
    return ActivityEnvelope(activity=ActivityResponse.model_validate(activity))


@router.delete("", response_model=SuccessResponse)
async def delete_activity(
    trip_id: TripId,
    activity_data: ActivityDelete,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete the activity identified by ``id`` in the body. Trip owner only."""
    activity_service.delete_activity(activity_data.id, current_user.id, db, trip_id=trip_id)
    return SuccessResponse()

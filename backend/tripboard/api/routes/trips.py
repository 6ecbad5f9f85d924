"""
Trip management routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from tripboard.api.dependencies import TripId, get_current_user
from tripboard.db.session import get_db
from tripboard.models.user import User
from tripboard.schemas.common import SuccessResponse
from tripboard.schemas.trip import (
    TripCreate, TripUpdate, TripResponse, TripEnvelope, TripListEnvelope
)
from tripboard.services import trip_service

router = APIRouter(prefix="/trips", tags=["trips"])


def _trip_list(trips) -> TripListEnvelope:
    return TripListEnvelope(trips=[TripResponse.model_validate(t) for t in trips])


@router.get("", response_model=TripListEnvelope)
async def list_my_trips(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """List the current user's trips, newest first."""
    return _trip_list(trip_service.list_trips_by_owner(current_user.id, db))


@router.get("/public", response_model=TripListEnvelope)
async def list_public_trips(db: Session = Depends(get_db)):
    """List every trip, newest first."""
    return _trip_list(trip_service.list_all_trips(db))


@router.post("", response_model=TripEnvelope, status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip_data: TripCreate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Create a new trip owned by the current user."""
    trip = trip_service.create_trip(current_user.id, trip_data, db)
    return TripEnvelope(trip=TripResponse.model_validate(trip))


@router.get("/{trip_id}", response_model=TripEnvelope)
async def get_trip(trip_id: TripId, db: Session = Depends(get_db)):
    """Get trip details with activities."""
    trip = trip_service.get_trip(trip_id, db)
    return TripEnvelope(trip=TripResponse.model_validate(trip))


@router.put("/{trip_id}", response_model=TripEnvelope)
async def update_trip(
    trip_id: TripId,
    trip_data: TripUpdate,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Update a trip. Owner only."""
    trip = trip_service.update_trip(trip_id, current_user.id, trip_data, db)
    return TripEnvelope(trip=TripResponse.model_validate(trip))


@router.delete("/{trip_id}", response_model=SuccessResponse)
async def delete_trip(
    trip_id: TripId,
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
):
    """Delete a trip and its activities. Owner only."""
    trip_service.delete_trip(trip_id, current_user.id, db)
    return SuccessResponse()

"""
Ownership guard for trip mutations.

Policy: a missing trip is reported as NotFound (404) and a trip owned by
someone else as Forbidden (403). The two are never collapsed.
"""
from typing import Optional
from sqlalchemy.orm import Session
from tripboard.core.errors import ForbiddenError, NotFoundError, UnauthorizedError
from tripboard.models.trip import Trip


def authorize_trip_mutation(trip_id: int, requester_id: Optional[int], db: Session) -> Trip:
    """Return the trip if ``requester_id`` may mutate it, raise otherwise."""
    if requester_id is None:
        raise UnauthorizedError()

    trip = db.get(Trip, trip_id)
    if not trip:
        raise NotFoundError("Trip not found")

    if trip.user_id != requester_id:
        raise ForbiddenError("You do not own this trip")

    return trip

"""
Pydantic schemas for Trip and DailyActivity entities.
"""
from pydantic import Field, model_validator
from typing import List, Optional
from datetime import date as dt_date, datetime, time as dt_time
from tripboard.schemas.common import MAX_ID, CamelModel, RequestModel, reject_nulls


class ActivityCreate(RequestModel):
    """Schema for activity creation."""
    date: dt_date
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    location: str = Field(min_length=1)
    time: Optional[dt_time] = None
    notes: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


class ActivityUpdate(RequestModel):
    """Schema for activity update. Only fields that are sent change."""
    id: int = Field(ge=1, le=MAX_ID)
    date: Optional[dt_date] = None
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = Field(default=None, min_length=1)
    time: Optional[dt_time] = None
    notes: Optional[str] = None
    tags: Optional[List[str]] = None

    @model_validator(mode="before")
    @classmethod
    def required_fields_not_null(cls, values):
        if isinstance(values, dict):
            reject_nulls(values, ("date", "title", "description", "location", "tags"))
        return values


class ActivityDelete(RequestModel):
    """Schema for activity deletion."""
    id: int = Field(ge=1, le=MAX_ID)


class ActivityResponse(CamelModel):
    """Schema for activity response."""
    id: int
    trip_id: int
    date: dt_date
    title: str
    description: str
    location: str
    time: Optional[dt_time] = None
    notes: Optional[str] = None
    tags: List[str] = []
    created_at: datetime
    updated_at: datetime


class TripCreate(RequestModel):
    """Schema for trip creation."""
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    start_date: dt_date
    end_date: dt_date
    location: str = Field(min_length=1)
    tags: List[str] = Field(default_factory=list)
    image_url: Optional[str] = None
    general_description: Optional[str] = None

    @model_validator(mode="after")
    def check_date_range(self):
        if self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class TripUpdate(RequestModel):
    """Schema for trip update. Only fields that are sent change."""
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    start_date: Optional[dt_date] = None
    end_date: Optional[dt_date] = None
    location: Optional[str] = Field(default=None, min_length=1)
    tags: Optional[List[str]] = None
    image_url: Optional[str] = None
    general_description: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def required_fields_not_null(cls, values):
        if isinstance(values, dict):
            reject_nulls(values, (
                "title", "description", "startDate", "start_date", "endDate",
                "end_date", "location", "tags",
            ))
        return values


class TripResponse(CamelModel):
    """Schema for trip response with its activities."""
    id: int
    title: str
    description: str
    start_date: dt_date
    end_date: dt_date
    location: str
    tags: List[str] = []
    image_url: Optional[str] = None
    general_description: Optional[str] = None
    user_id: int
    daily_activities: List[ActivityResponse] = []
    created_at: datetime
    updated_at: datetime


class TripEnvelope(CamelModel):
    trip: TripResponse


class TripListEnvelope(CamelModel):
    trips: List[TripResponse]


class ActivityEnvelope(CamelModel):
    activity: ActivityResponse


class ActivityListEnvelope(CamelModel):
    activities: List[ActivityResponse]

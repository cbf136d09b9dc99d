"""
Event Use Case DTOs (Data Transfer Objects)

Command and Response classes for the event domain.
"""

from datetime import date, time
from email.utils import parsedate_to_datetime
from typing import Any, List, Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from community_api.domain.entities import (
    Event,
    EventAdmin,
    EventRegistrant,
    Recurrence,
)


# ============================================================================
# Command DTOs
# ============================================================================


class EventInput(BaseModel):
    """
    Event creation payload.

    organization_id is optional so a missing target is reported as
    ORGANIZATION_NOT_FOUND by the use case rather than rejected up front.

    Date and time fields take ISO strings or HTTP-date strings
    ("Sat, 17 Oct 2026 10:00:00 GMT"); an empty string means unset.
    """

    organization_id: Optional[UUID] = None

    title: str
    description: str

    start_date: date
    end_date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None

    all_day: bool
    recurring: bool
    recurrence: Recurrence = Recurrence.once

    is_public: bool
    is_registerable: bool

    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def parse_date(cls, value: Any) -> Any:
        value = _blank_to_none(value)
        http_date = _parse_http_date(value)
        return http_date.date() if http_date is not None else value

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def parse_time(cls, value: Any) -> Any:
        value = _blank_to_none(value)
        http_date = _parse_http_date(value)
        return http_date.time() if http_date is not None else value


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _parse_http_date(value: Any):
    if not isinstance(value, str) or "," not in value:
        return None
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None


# ============================================================================
# Response DTOs
# ============================================================================


class RegistrantInfo(BaseModel):
    """Registration record: the user id paired with the user reference"""

    user_id: str
    user: str
    registered_at: str


class EventResponse(BaseModel):
    """Fully populated event"""

    id: str
    title: str
    description: str
    start_date: date
    end_date: Optional[date]
    start_time: Optional[time]
    end_time: Optional[time]
    all_day: bool
    recurring: bool
    recurrence: Recurrence
    is_public: bool
    is_registerable: bool
    location: Optional[str]
    latitude: Optional[float]
    longitude: Optional[float]
    creator: str
    organization: str
    admins: List[str]
    registrants: List[RegistrantInfo]
    created_at: str

    @classmethod
    def from_entities(
        cls,
        event: Event,
        admins: List[EventAdmin],
        registrants: List[EventRegistrant],
    ) -> "EventResponse":
        return cls(
            id=str(event.id),
            title=event.title,
            description=event.description,
            start_date=event.start_date,
            end_date=event.end_date,
            start_time=event.start_time,
            end_time=event.end_time,
            all_day=event.all_day,
            recurring=event.recurring,
            recurrence=event.recurrence,
            is_public=event.is_public,
            is_registerable=event.is_registerable,
            location=event.location,
            latitude=event.latitude,
            longitude=event.longitude,
            creator=str(event.creator_id),
            organization=str(event.organization_id),
            admins=[str(admin.user_id) for admin in admins],
            registrants=[
                RegistrantInfo(
                    user_id=str(registrant.user_id),
                    user=str(registrant.user_id),
                    registered_at=registrant.created_at.isoformat(),
                )
                for registrant in registrants
            ],
            created_at=event.created_at.isoformat(),
        )

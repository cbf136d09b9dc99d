"""
Event Entity

Something that happens under an organization.
"""

from datetime import UTC, date, datetime, time
from typing import TYPE_CHECKING, Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from .enums import Recurrence

if TYPE_CHECKING:
    from .event_admin import EventAdmin
    from .event_registrant import EventRegistrant


class Event(SQLModel, table=True):
    """
    Event entity - owned by exactly one organization.

    Business Rules:
    - Created only through CreateEventUseCase
    - Creator is the first admin and the first registrant
    - admins and registrants are join rows (EventAdmin, EventRegistrant)
    """

    __tablename__ = "events"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    title: str = Field(max_length=255)
    description: str

    start_date: date
    end_date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None

    all_day: bool
    recurring: bool
    recurrence: Recurrence = Field(default=Recurrence.once)

    is_public: bool
    is_registerable: bool

    location: Optional[str] = Field(default=None, max_length=255)
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    creator_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    organization_id: UUID = Field(
        foreign_key="organizations.id", nullable=False, index=True
    )

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    # Relationships
    admins: list["EventAdmin"] = Relationship(back_populates="event")
    registrants: list["EventRegistrant"] = Relationship(back_populates="event")

    __table_args__ = (Index("idx_event_start_date", "start_date"),)

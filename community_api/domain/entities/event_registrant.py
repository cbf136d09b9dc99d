"""
EventRegistrant Entity

Registration of a user for an event.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

if TYPE_CHECKING:
    from .event import Event


class EventRegistrant(SQLModel, table=True):
    """
    EventRegistrant entity - pairs a user with an event they registered for.

    Business Rules:
    - (event_id, user_id) must be unique
    - Registrants are listed in registration order
    - The same row backs Event.registrants and the user's registered_events
    """

    __tablename__ = "event_registrants"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_id: UUID = Field(foreign_key="events.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    event: "Event" = Relationship(back_populates="registrants")

    __table_args__ = (
        Index(
            "idx_event_registrant_event_user", "event_id", "user_id", unique=True
        ),
    )

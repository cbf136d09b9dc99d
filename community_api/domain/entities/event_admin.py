"""
EventAdmin Entity

Grants a user administration rights over an event.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

if TYPE_CHECKING:
    from .event import Event


class EventAdmin(SQLModel, table=True):
    """
    EventAdmin entity - one row per (event, admin user).

    The same row backs Event.admins and the user's event_admin list.
    """

    __tablename__ = "event_admins"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    event_id: UUID = Field(foreign_key="events.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    event: "Event" = Relationship(back_populates="admins")

    __table_args__ = (
        Index("idx_event_admin_event_user", "event_id", "user_id", unique=True),
    )

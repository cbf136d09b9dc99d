"""
User Entity

Represents a person who joins organizations and takes part in events.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

if TYPE_CHECKING:
    from .membership import OrganizationMembership


class User(SQLModel, table=True):
    """
    User entity - a person who can belong to multiple organizations.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash
    - Event and organization back-references are derived from join rows
      (memberships, event admins, event registrants), never stored here
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    app_language_code: str = Field(default="en", max_length=10)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    # Relationships
    memberships: list["OrganizationMembership"] = Relationship(back_populates="user")

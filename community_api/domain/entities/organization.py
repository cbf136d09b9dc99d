"""
Organization Entity

A community that owns events.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

if TYPE_CHECKING:
    from .membership import OrganizationMembership


class Organization(SQLModel, table=True):
    """
    Organization entity - a community that owns events.

    Business Rules:
    - creator is implicitly authorized for every organization operation
    - admins and members are OrganizationMembership rows
    - Public organizations can be joined without an invitation
    """

    __tablename__ = "organizations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    description: str = Field(default="")

    is_public: bool = Field(default=True)

    creator_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    # Relationships
    memberships: list["OrganizationMembership"] = Relationship(
        back_populates="organization"
    )

    __table_args__ = (Index("idx_organization_is_public", "is_public"),)

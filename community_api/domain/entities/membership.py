"""
OrganizationMembership Entity

Links User to Organization with a role.
"""

from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from .enums import MembershipRole

if TYPE_CHECKING:
    from .organization import Organization
    from .user import User


class OrganizationMembership(SQLModel, table=True):
    """
    OrganizationMembership entity - links User to Organization with a role.

    Business Rules:
    - (user_id, organization_id) must be unique
    - Every row puts the user in the organization's members set
    - role=admin additionally puts the user in the admins set
    - Organization creator is stored as an admin
    """

    __tablename__ = "organization_memberships"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    organization_id: UUID = Field(
        foreign_key="organizations.id", nullable=False, index=True
    )

    role: MembershipRole = Field(nullable=False)

    # Timestamps
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC), sa_column=Column(DateTime)
    )

    # Relationships
    user: "User" = Relationship(back_populates="memberships")
    organization: "Organization" = Relationship(back_populates="memberships")

    __table_args__ = (
        Index(
            "idx_membership_user_organization",
            "user_id",
            "organization_id",
            unique=True,
        ),
        Index("idx_membership_role", "role"),
    )

"""
Organization capability checks.

Callers load the organization and the requester's membership row, then ask a
question. Nothing here touches storage.
"""

from typing import Optional
from uuid import UUID

from .entities import MembershipRole, Organization, OrganizationMembership


def is_organization_creator(organization: Organization, user_id: UUID) -> bool:
    return organization.creator_id == user_id


def is_organization_member(
    organization: Organization,
    user_id: UUID,
    membership: Optional[OrganizationMembership],
) -> bool:
    """Any membership row counts, admins included."""
    return (
        membership is not None
        and membership.user_id == user_id
        and membership.organization_id == organization.id
    )


def can_create_event(
    organization: Organization,
    user_id: UUID,
    membership: Optional[OrganizationMembership],
) -> bool:
    """Creator or any member of the organization may create events under it."""
    return is_organization_creator(organization, user_id) or is_organization_member(
        organization, user_id, membership
    )


def is_organization_admin(
    organization: Organization,
    user_id: UUID,
    membership: Optional[OrganizationMembership],
) -> bool:
    """Creator, or a member holding the admin role."""
    if is_organization_creator(organization, user_id):
        return True
    return (
        is_organization_member(organization, user_id, membership)
        and membership.role == MembershipRole.admin
    )

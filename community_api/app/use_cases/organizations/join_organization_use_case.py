"""
Join Organization Use Case

Lets a user join a public organization as a plain member.
"""

from uuid import UUID

from community_api.app.services.unit_of_work import UnitOfWork
from community_api.constants import (
    ORGANIZATION_NOT_FOUND,
    USER_ALREADY_MEMBER,
    USER_NOT_AUTHORIZED,
    USER_NOT_FOUND,
)
from community_api.domain.entities import MembershipRole, OrganizationMembership
from community_api.domain.policies import is_organization_member
from community_api.libs.result import Error, Result, Return

from .dtos import OrganizationResponse


class JoinOrganizationUseCase:
    """
    Use case for joining a public organization.

    Business Rules:
    - Requester must exist (USER_NOT_FOUND)
    - Organization must exist (ORGANIZATION_NOT_FOUND)
    - Private organizations cannot be joined directly (USER_NOT_AUTHORIZED)
    - Existing members cannot join again (USER_ALREADY_MEMBER)
    - Joining grants membership, never adminship
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, requester_user_id: UUID, organization_id: UUID
    ) -> Result[OrganizationResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(requester_user_id)
            if user is None:
                return Return.err(Error(USER_NOT_FOUND, "User not found"))

            organization = await self.uow.organizations.get_by_id(organization_id)
            if organization is None:
                return Return.err(
                    Error(ORGANIZATION_NOT_FOUND, "Organization not found")
                )

            if not organization.is_public:
                return Return.err(
                    Error(
                        USER_NOT_AUTHORIZED,
                        "Private organizations cannot be joined directly",
                    )
                )

            existing = await self.uow.memberships.get_by_user_and_organization(
                user.id, organization.id
            )
            if is_organization_member(organization, user.id, existing):
                return Return.err(
                    Error(
                        USER_ALREADY_MEMBER,
                        "User is already a member of this organization",
                    )
                )

            await self.uow.memberships.create(
                OrganizationMembership(
                    user_id=user.id,
                    organization_id=organization.id,
                    role=MembershipRole.member,
                )
            )

            memberships = await self.uow.memberships.get_by_organization_id(
                organization.id
            )

            await self.uow.commit()

            return Return.ok(
                OrganizationResponse.from_entities(organization, memberships)
            )

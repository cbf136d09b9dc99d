"""
Create Organization Use Case

Creates an organization owned by the requester.
"""

import logging
from uuid import UUID

from community_api.app.services.unit_of_work import UnitOfWork
from community_api.constants import USER_NOT_FOUND
from community_api.domain.entities import (
    MembershipRole,
    Organization,
    OrganizationMembership,
)
from community_api.libs.result import Error, Result, Return

from .dtos import CreateOrganizationCommand, OrganizationResponse

logger = logging.getLogger(__name__)


class CreateOrganizationUseCase:
    """
    Use case for creating an organization.

    Business Rules:
    - Requester must exist (USER_NOT_FOUND)
    - Requester becomes creator, admin and member
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, requester_user_id: UUID, command: CreateOrganizationCommand
    ) -> Result[OrganizationResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(requester_user_id)
            if user is None:
                return Return.err(Error(USER_NOT_FOUND, "User not found"))

            organization = Organization(
                name=command.name,
                description=command.description,
                is_public=command.is_public,
                creator_id=user.id,
            )
            organization = await self.uow.organizations.create(organization)

            membership = OrganizationMembership(
                user_id=user.id,
                organization_id=organization.id,
                role=MembershipRole.admin,
            )
            membership = await self.uow.memberships.create(membership)

            await self.uow.commit()

            logger.info(f"Organization {organization.id} created by user {user.id}")

            return Return.ok(
                OrganizationResponse.from_entities(organization, [membership])
            )

from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from community_api.app.repositories.membership_repository import IMembershipRepository
from community_api.domain.entities import OrganizationMembership


class MembershipRepository(IMembershipRepository):
    """Organization membership repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_and_organization(
        self, user_id: UUID, organization_id: UUID
    ) -> Optional[OrganizationMembership]:
        """Get membership by user and organization"""
        stmt = select(OrganizationMembership).where(
            OrganizationMembership.user_id == user_id,
            OrganizationMembership.organization_id == organization_id,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_organization_id(
        self, organization_id: UUID
    ) -> List[OrganizationMembership]:
        """Get all memberships of an organization, oldest first"""
        stmt = (
            select(OrganizationMembership)
            .where(OrganizationMembership.organization_id == organization_id)
            .order_by(OrganizationMembership.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, membership: OrganizationMembership) -> OrganizationMembership:
        """Create a new membership"""
        self.session.add(membership)
        await self.session.flush()
        await self.session.refresh(membership)
        return membership

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from community_api.domain.entities import OrganizationMembership


class IMembershipRepository(ABC):
    """Organization membership repository interface - application layer"""

    @abstractmethod
    async def get_by_user_and_organization(
        self, user_id: UUID, organization_id: UUID
    ) -> Optional[OrganizationMembership]:
        """Get membership by user and organization"""
        pass

    @abstractmethod
    async def get_by_organization_id(
        self, organization_id: UUID
    ) -> List[OrganizationMembership]:
        """Get all memberships of an organization, oldest first"""
        pass

    @abstractmethod
    async def create(self, membership: OrganizationMembership) -> OrganizationMembership:
        """Create a new membership"""
        pass

"""
Organization Use Case DTOs (Data Transfer Objects)
"""

from typing import List

from pydantic import BaseModel

from community_api.domain.entities import Organization, OrganizationMembership
from community_api.domain.policies import is_organization_admin


class CreateOrganizationCommand(BaseModel):
    """Validated intent to create an organization"""

    name: str
    description: str = ""
    is_public: bool = True


class OrganizationResponse(BaseModel):
    """Organization with its admins and members"""

    id: str
    name: str
    description: str
    is_public: bool
    creator: str
    admins: List[str]
    members: List[str]

    @classmethod
    def from_entities(
        cls, organization: Organization, memberships: List[OrganizationMembership]
    ) -> "OrganizationResponse":
        return cls(
            id=str(organization.id),
            name=organization.name,
            description=organization.description,
            is_public=organization.is_public,
            creator=str(organization.creator_id),
            admins=[
                str(m.user_id)
                for m in memberships
                if is_organization_admin(organization, m.user_id, m)
            ],
            members=[str(m.user_id) for m in memberships],
        )

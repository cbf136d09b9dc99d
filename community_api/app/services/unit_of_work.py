from abc import ABC, abstractmethod

from community_api.app.repositories.event_admin_repository import IEventAdminRepository
from community_api.app.repositories.event_registrant_repository import (
    IEventRegistrantRepository,
)
from community_api.app.repositories.event_repository import IEventRepository
from community_api.app.repositories.membership_repository import IMembershipRepository
from community_api.app.repositories.organization_repository import (
    IOrganizationRepository,
)
from community_api.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    organizations: IOrganizationRepository
    memberships: IMembershipRepository
    events: IEventRepository
    event_admins: IEventAdminRepository
    event_registrants: IEventRegistrantRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

from sqlmodel.ext.asyncio.session import AsyncSession

from community_api.adapter.repositories.event_admin_repository import (
    EventAdminRepository,
)
from community_api.adapter.repositories.event_registrant_repository import (
    EventRegistrantRepository,
)
from community_api.adapter.repositories.event_repository import EventRepository
from community_api.adapter.repositories.membership_repository import (
    MembershipRepository,
)
from community_api.adapter.repositories.organization_repository import (
    OrganizationRepository,
)
from community_api.adapter.repositories.user_repository import UserRepository
from community_api.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.organizations = OrganizationRepository(self.session)
        self.memberships = MembershipRepository(self.session)
        self.events = EventRepository(self.session)
        self.event_admins = EventAdminRepository(self.session)
        self.event_registrants = EventRegistrantRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()

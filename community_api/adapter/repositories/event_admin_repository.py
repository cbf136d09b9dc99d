from typing import List
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from community_api.app.repositories.event_admin_repository import IEventAdminRepository
from community_api.domain.entities import EventAdmin


class EventAdminRepository(IEventAdminRepository):
    """Event admin repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_event_id(self, event_id: UUID) -> List[EventAdmin]:
        """Get all admins of an event, oldest first"""
        stmt = (
            select(EventAdmin)
            .where(EventAdmin.event_id == event_id)
            .order_by(EventAdmin.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_user_id(self, user_id: UUID) -> List[EventAdmin]:
        """Get all events a user administers, oldest first"""
        stmt = (
            select(EventAdmin)
            .where(EventAdmin.user_id == user_id)
            .order_by(EventAdmin.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, event_admin: EventAdmin) -> EventAdmin:
        """Create a new event admin"""
        self.session.add(event_admin)
        await self.session.flush()
        await self.session.refresh(event_admin)
        return event_admin

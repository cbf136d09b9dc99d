from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from community_api.app.repositories.event_repository import IEventRepository
from community_api.domain.entities import Event


class EventRepository(IEventRepository):
    """Event repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        """Get event by ID"""
        stmt = select(Event).where(Event.id == event_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_creator_id(self, user_id: UUID) -> List[Event]:
        """Get all events created by a user, oldest first"""
        stmt = (
            select(Event).where(Event.creator_id == user_id).order_by(Event.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, event: Event) -> Event:
        """Create a new event"""
        self.session.add(event)
        await self.session.flush()
        await self.session.refresh(event)
        return event

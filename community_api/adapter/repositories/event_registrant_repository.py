from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from community_api.app.repositories.event_registrant_repository import (
    IEventRegistrantRepository,
)
from community_api.domain.entities import EventRegistrant


class EventRegistrantRepository(IEventRegistrantRepository):
    """Event registrant repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_event_and_user(
        self, event_id: UUID, user_id: UUID
    ) -> Optional[EventRegistrant]:
        """Get registration by event and user"""
        stmt = select(EventRegistrant).where(
            EventRegistrant.event_id == event_id,
            EventRegistrant.user_id == user_id,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_event_id(self, event_id: UUID) -> List[EventRegistrant]:
        """Get all registrants of an event in registration order"""
        stmt = (
            select(EventRegistrant)
            .where(EventRegistrant.event_id == event_id)
            .order_by(EventRegistrant.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_user_id(self, user_id: UUID) -> List[EventRegistrant]:
        """Get all registrations of a user, oldest first"""
        stmt = (
            select(EventRegistrant)
            .where(EventRegistrant.user_id == user_id)
            .order_by(EventRegistrant.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, registrant: EventRegistrant) -> EventRegistrant:
        """Create a new registration"""
        self.session.add(registrant)
        await self.session.flush()
        await self.session.refresh(registrant)
        return registrant

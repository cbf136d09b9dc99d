from abc import ABC, abstractmethod
from typing import List
from uuid import UUID

from community_api.domain.entities import EventAdmin


class IEventAdminRepository(ABC):
    """Event admin repository interface - application layer"""

    @abstractmethod
    async def get_by_event_id(self, event_id: UUID) -> List[EventAdmin]:
        """Get all admins of an event, oldest first"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> List[EventAdmin]:
        """Get all events a user administers, oldest first"""
        pass

    @abstractmethod
    async def create(self, event_admin: EventAdmin) -> EventAdmin:
        """Create a new event admin"""
        pass

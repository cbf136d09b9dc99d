from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from community_api.domain.entities import Event


class IEventRepository(ABC):
    """Event repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, event_id: UUID) -> Optional[Event]:
        """Get event by ID"""
        pass

    @abstractmethod
    async def get_by_creator_id(self, user_id: UUID) -> List[Event]:
        """Get all events created by a user, oldest first"""
        pass

    @abstractmethod
    async def create(self, event: Event) -> Event:
        """Create a new event"""
        pass

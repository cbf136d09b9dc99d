from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from community_api.domain.entities import EventRegistrant


class IEventRegistrantRepository(ABC):
    """Event registrant repository interface - application layer"""

    @abstractmethod
    async def get_by_event_and_user(
        self, event_id: UUID, user_id: UUID
    ) -> Optional[EventRegistrant]:
        """Get registration by event and user"""
        pass

    @abstractmethod
    async def get_by_event_id(self, event_id: UUID) -> List[EventRegistrant]:
        """Get all registrants of an event in registration order"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> List[EventRegistrant]:
        """Get all registrations of a user, oldest first"""
        pass

    @abstractmethod
    async def create(self, registrant: EventRegistrant) -> EventRegistrant:
        """Create a new registration"""
        pass

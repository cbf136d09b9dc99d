"""
Get Event Use Case

Loads an event together with its admins and registrants.
"""

from uuid import UUID

from community_api.app.services.unit_of_work import UnitOfWork
from community_api.constants import EVENT_NOT_FOUND
from community_api.libs.result import Error, Result, Return

from .dtos import EventResponse


class GetEventUseCase:
    """Use case for reading a single event."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, event_id: UUID) -> Result[EventResponse]:
        async with self.uow:
            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error(EVENT_NOT_FOUND, "Event not found"))

            admins = await self.uow.event_admins.get_by_event_id(event.id)
            registrants = await self.uow.event_registrants.get_by_event_id(event.id)

            return Return.ok(EventResponse.from_entities(event, admins, registrants))

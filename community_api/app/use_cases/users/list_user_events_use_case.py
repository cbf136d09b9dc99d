"""
List User Events Use Case

Reads the events a user created, registered for and administers.
"""

from uuid import UUID

from community_api.app.services.unit_of_work import UnitOfWork
from community_api.constants import USER_NOT_FOUND
from community_api.libs.result import Error, Result, Return

from .dtos import UserEventsResponse


class ListUserEventsUseCase:
    """
    Use case for loading a user's event back-references.

    All three lists are derived from event rows and join rows, so they always
    agree with Event.creator, Event.registrants and Event.admins.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserEventsResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error(USER_NOT_FOUND, "User not found"))

            created = await self.uow.events.get_by_creator_id(user.id)
            registered = await self.uow.event_registrants.get_by_user_id(user.id)
            administered = await self.uow.event_admins.get_by_user_id(user.id)

            return Return.ok(
                UserEventsResponse(
                    created_events=[str(event.id) for event in created],
                    registered_events=[str(r.event_id) for r in registered],
                    event_admin=[str(a.event_id) for a in administered],
                )
            )

"""
Register For Event Use Case

Adds the requester to an event's registrants.
"""

import logging
from uuid import UUID

from community_api.app.services.unit_of_work import UnitOfWork
from community_api.constants import (
    EVENT_NOT_FOUND,
    USER_ALREADY_REGISTERED,
    USER_NOT_FOUND,
)
from community_api.domain.entities import EventRegistrant
from community_api.libs.result import Error, Result, Return

from .dtos import EventResponse

logger = logging.getLogger(__name__)


class RegisterForEventUseCase:
    """
    Use case for registering the requester for an event.

    Business Rules:
    - Requester must exist (USER_NOT_FOUND)
    - Event must exist (EVENT_NOT_FOUND)
    - A user registers at most once per event (USER_ALREADY_REGISTERED)
    - Registration is appended after existing registrants
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, requester_user_id: UUID, event_id: UUID
    ) -> Result[EventResponse]:
        """
        Execute register for event use case.

        Args:
            requester_user_id: User ID from the access token
            event_id: Event to register for

        Returns:
            Result with the updated EventResponse, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(requester_user_id)
            if user is None:
                return Return.err(Error(USER_NOT_FOUND, "User not found"))

            event = await self.uow.events.get_by_id(event_id)
            if event is None:
                return Return.err(Error(EVENT_NOT_FOUND, "Event not found"))

            existing = await self.uow.event_registrants.get_by_event_and_user(
                event.id, user.id
            )
            if existing is not None:
                return Return.err(
                    Error(
                        USER_ALREADY_REGISTERED,
                        "User is already registered for this event",
                    )
                )

            await self.uow.event_registrants.create(
                EventRegistrant(event_id=event.id, user_id=user.id)
            )

            admins = await self.uow.event_admins.get_by_event_id(event.id)
            registrants = await self.uow.event_registrants.get_by_event_id(event.id)

            await self.uow.commit()

            logger.info(f"User {user.id} registered for event {event.id}")

            return Return.ok(EventResponse.from_entities(event, admins, registrants))

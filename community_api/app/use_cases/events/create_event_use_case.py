"""
Create Event Use Case

Creates an event under an organization and links it back to its creator.
"""

import logging
from typing import Any, Mapping, Optional
from uuid import UUID

from pydantic import ValidationError

from community_api.app.services.unit_of_work import UnitOfWork
from community_api.constants import (
    INVALID_EVENT_INPUT,
    ORGANIZATION_NOT_AUTHORIZED,
    ORGANIZATION_NOT_FOUND,
    USER_NOT_FOUND,
)
from community_api.domain.entities import Event, EventAdmin, EventRegistrant
from community_api.domain.policies import can_create_event
from community_api.libs.result import Error, Result, Return

from .dtos import EventInput, EventResponse

logger = logging.getLogger(__name__)


def _organization_id_of(data: Any) -> Optional[UUID]:
    """Target organization of a raw payload; unparseable ids resolve to nothing"""
    if not isinstance(data, Mapping):
        return None
    organization_id = data.get("organization_id")
    if organization_id is None or isinstance(organization_id, UUID):
        return organization_id
    try:
        return UUID(str(organization_id))
    except ValueError:
        return None


def _describe(exc: ValidationError) -> str:
    fields = ", ".join(
        ".".join(str(part) for part in error["loc"]) for error in exc.errors()
    )
    return f"Invalid event input: {fields}"


class CreateEventUseCase:
    """
    Use case for creating an event under an organization.

    Business Rules:
    - Requester must exist, checked before anything else, whatever the
      payload holds (USER_NOT_FOUND)
    - Organization must exist (ORGANIZATION_NOT_FOUND), also when no
      payload or no organization_id is supplied
    - Requester must be the organization creator or one of its members
      (ORGANIZATION_NOT_AUTHORIZED)
    - Only then are the event fields validated (INVALID_EVENT_INPUT)
    - Creator becomes the first admin and the first registrant
    - Event lands in the requester's created_events, registered_events and
      event_admin lists exactly once
    - Organization is read, never written
    - Not deduplicated: identical calls create distinct events
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, requester_user_id: UUID, data: Optional[Mapping[str, Any]]
    ) -> Result[EventResponse]:
        """
        Execute create event use case.

        Args:
            requester_user_id: User ID from the access token
            data: Raw event payload, may be absent or malformed

        Returns:
            Result with EventResponse DTO, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(requester_user_id)
            if user is None:
                return Return.err(Error(USER_NOT_FOUND, "User not found"))

            organization_id = _organization_id_of(data)
            organization = None
            if organization_id is not None:
                organization = await self.uow.organizations.get_by_id(organization_id)
            if organization is None:
                return Return.err(
                    Error(ORGANIZATION_NOT_FOUND, "Organization not found")
                )

            membership = await self.uow.memberships.get_by_user_and_organization(
                user.id, organization.id
            )
            if not can_create_event(organization, user.id, membership):
                return Return.err(
                    Error(ORGANIZATION_NOT_AUTHORIZED, "Organization not authorized")
                )

            try:
                event_input = EventInput.model_validate(data)
            except ValidationError as exc:
                return Return.err(Error(INVALID_EVENT_INPUT, _describe(exc)))

            event = Event(
                **event_input.model_dump(exclude={"organization_id"}),
                creator_id=user.id,
                organization_id=organization.id,
            )
            event = await self.uow.events.create(event)

            # Creator administers and attends their own event
            admin = await self.uow.event_admins.create(
                EventAdmin(event_id=event.id, user_id=user.id)
            )
            registrant = await self.uow.event_registrants.create(
                EventRegistrant(event_id=event.id, user_id=user.id)
            )

            await self.uow.commit()

            logger.info(
                f"Event {event.id} created in organization {organization.id} "
                f"by user {user.id}"
            )

            return Return.ok(EventResponse.from_entities(event, [admin], [registrant]))

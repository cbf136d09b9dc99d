from typing import Any, Dict, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from community_api.api.error import ClientError, error_for
from community_api.app.services.unit_of_work import UnitOfWork
from community_api.app.use_cases.events import (
    CreateEventUseCase,
    EventResponse,
    GetEventUseCase,
    RegisterForEventUseCase,
)
from community_api.constants import INVALID_EVENT_ID
from community_api.depends import get_current_user, get_unit_of_work
from community_api.libs.result import Error

router = APIRouter(prefix="/events", tags=["Event"])


class CreateEventRequest(BaseModel):
    """
    Create event HTTP request payload

    data is passed through untyped: the requester and the organization are
    checked before the event fields are validated.
    """

    data: Optional[Dict[str, Any]] = None


def _parse_event_id(event_id: str) -> UUID:
    try:
        return UUID(event_id)
    except ValueError:
        raise ClientError(
            Error(INVALID_EVENT_ID, "Invalid event ID format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


@router.post("", status_code=status.HTTP_201_CREATED, response_model=EventResponse)
async def create_event(
    request: Optional[CreateEventRequest] = None,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Event

    Creates an event under an organization. The requester becomes the
    event's creator, first admin and first registrant.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: ORGANIZATION_NOT_AUTHORIZED
        - 404 Not Found: USER_NOT_FOUND, ORGANIZATION_NOT_FOUND
        - 422 Unprocessable Entity: INVALID_EVENT_INPUT
        - 500 Internal Server Error: Server error
    """
    user_id = UUID(current_user["user_id"])
    data = request.data if request is not None else None

    use_case = CreateEventUseCase(uow)
    result = await use_case.execute(user_id, data)

    if result.is_err():
        raise error_for(result.error)

    return result.value


@router.get(
    "/{event_id}", status_code=status.HTTP_200_OK, response_model=EventResponse
)
async def get_event(
    event_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Event

    Raises:
        - 400 Bad Request: Invalid event_id format
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: EVENT_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    event_uuid = _parse_event_id(event_id)

    use_case = GetEventUseCase(uow)
    result = await use_case.execute(event_uuid)

    if result.is_err():
        raise error_for(result.error)

    return result.value


@router.post(
    "/{event_id}/register", status_code=status.HTTP_200_OK, response_model=EventResponse
)
async def register_for_event(
    event_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Register For Event

    Raises:
        - 400 Bad Request: Invalid event_id format
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: USER_NOT_FOUND, EVENT_NOT_FOUND
        - 409 Conflict: USER_ALREADY_REGISTERED
        - 500 Internal Server Error: Server error
    """
    user_id = UUID(current_user["user_id"])
    event_uuid = _parse_event_id(event_id)

    use_case = RegisterForEventUseCase(uow)
    result = await use_case.execute(user_id, event_uuid)

    if result.is_err():
        raise error_for(result.error)

    return result.value

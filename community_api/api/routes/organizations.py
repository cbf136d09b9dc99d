from uuid import UUID
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from community_api.api.error import ClientError, error_for
from community_api.app.services.unit_of_work import UnitOfWork
from community_api.app.use_cases.organizations import (
    CreateOrganizationCommand,
    CreateOrganizationUseCase,
    JoinOrganizationUseCase,
    OrganizationResponse,
)
from community_api.constants import INVALID_ORGANIZATION_ID
from community_api.depends import get_current_user, get_unit_of_work
from community_api.libs.result import Error

router = APIRouter(prefix="/organizations", tags=["Organization"])


class CreateOrganizationRequest(BaseModel):
    """Create organization HTTP request payload"""

    name: str = Field(..., min_length=1, max_length=255)
    description: str = Field(default="")
    is_public: bool = Field(default=True)


@router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=OrganizationResponse
)
async def create_organization(
    request: CreateOrganizationRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Organization

    The requester becomes creator, admin and member.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: USER_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    user_id = UUID(current_user["user_id"])

    command = CreateOrganizationCommand(
        name=request.name,
        description=request.description,
        is_public=request.is_public,
    )

    use_case = CreateOrganizationUseCase(uow)
    result = await use_case.execute(user_id, command)

    if result.is_err():
        raise error_for(result.error)

    return result.value


@router.post(
    "/{organization_id}/join",
    status_code=status.HTTP_200_OK,
    response_model=OrganizationResponse,
)
async def join_organization(
    organization_id: str,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Join Public Organization

    Raises:
        - 400 Bad Request: Invalid organization_id format
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: USER_NOT_AUTHORIZED (private organization)
        - 404 Not Found: USER_NOT_FOUND, ORGANIZATION_NOT_FOUND
        - 409 Conflict: USER_ALREADY_MEMBER
        - 500 Internal Server Error: Server error
    """
    user_id = UUID(current_user["user_id"])

    try:
        organization_uuid = UUID(organization_id)
    except ValueError:
        raise ClientError(
            Error(INVALID_ORGANIZATION_ID, "Invalid organization ID format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    use_case = JoinOrganizationUseCase(uow)
    result = await use_case.execute(user_id, organization_uuid)

    if result.is_err():
        raise error_for(result.error)

    return result.value

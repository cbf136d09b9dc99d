from uuid import UUID
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from community_api.api.error import error_for
from community_api.app.services.unit_of_work import UnitOfWork
from community_api.app.use_cases.users import (
    ListUserEventsUseCase,
    RegisterUserCommand,
    RegisterUserUseCase,
    UserEventsResponse,
    UserResponse,
)
from community_api.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["User"])


class RegisterUserRequest(BaseModel):
    """
    Register user HTTP request payload

    Validates incoming HTTP request before converting to RegisterUserCommand.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=8, description="User password (min 8 chars)")
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    app_language_code: str = Field(default="en", min_length=2, max_length=10)


@router.post("/users", status_code=status.HTTP_201_CREATED, response_model=UserResponse)
async def register_user(
    request: RegisterUserRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Register User

    Raises:
        - 409 Conflict: EMAIL_ALREADY_EXISTS
        - 422 Unprocessable Entity: INVALID_REQUEST
        - 500 Internal Server Error: Server error
    """
    command = RegisterUserCommand(
        email=request.email,
        password=request.password,
        first_name=request.first_name,
        last_name=request.last_name,
        app_language_code=request.app_language_code,
    )

    use_case = RegisterUserUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        raise error_for(result.error)

    return result.value


@router.get(
    "/me/events", status_code=status.HTTP_200_OK, response_model=UserEventsResponse
)
async def get_my_events(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Current User's Events

    Returns the ids of events the user created, registered for and administers.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: USER_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    user_id = UUID(current_user["user_id"])

    use_case = ListUserEventsUseCase(uow)
    result = await use_case.execute(user_id)

    if result.is_err():
        raise error_for(result.error)

    return result.value

from typing import Dict, Union

from fastapi import status

from community_api.constants import (
    EMAIL_ALREADY_EXISTS,
    EVENT_NOT_FOUND,
    INVALID_EVENT_ID,
    INVALID_EVENT_INPUT,
    INVALID_ORGANIZATION_ID,
    ORGANIZATION_NOT_AUTHORIZED,
    ORGANIZATION_NOT_FOUND,
    USER_ALREADY_MEMBER,
    USER_ALREADY_REGISTERED,
    USER_NOT_AUTHORIZED,
    USER_NOT_FOUND,
)
from community_api.libs.result import Error

INVALID_REQUEST = "INVALID_REQUEST"

# Use case error codes the HTTP layer answers as client errors
STATUS_BY_CODE: Dict[str, int] = {
    USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ORGANIZATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    USER_NOT_AUTHORIZED: status.HTTP_403_FORBIDDEN,
    ORGANIZATION_NOT_AUTHORIZED: status.HTTP_403_FORBIDDEN,
    EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    USER_ALREADY_MEMBER: status.HTTP_409_CONFLICT,
    USER_ALREADY_REGISTERED: status.HTTP_409_CONFLICT,
    INVALID_ORGANIZATION_ID: status.HTTP_400_BAD_REQUEST,
    INVALID_EVENT_ID: status.HTTP_400_BAD_REQUEST,
    INVALID_EVENT_INPUT: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)

    def to_dict(self) -> dict:
        return {"code": self.base_error.code, "message": self.base_error.message}


class ServerError(Exception):
    """Unexpected failure; the message stays in the logs, not the response"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)

    def to_dict(self) -> dict:
        return {"code": self.base_error.code, "message": "Internal server error"}


def error_for(error: Error) -> Union[ClientError, ServerError]:
    """
    Translate a use case error into the exception a route raises.

    Known codes become a ClientError with their mapped status; anything else
    is a ServerError.
    """
    status_code = STATUS_BY_CODE.get(error.code)
    if status_code is None:
        return ServerError(error)
    return ClientError(error, status_code=status_code)

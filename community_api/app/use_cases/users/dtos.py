"""
User Use Case DTOs (Data Transfer Objects)

All Command and Response classes for user domain.
"""

from typing import List

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterUserCommand(BaseModel):
    """Validated intent to create a user account"""

    email: str
    password: str
    first_name: str
    last_name: str
    app_language_code: str = "en"


# ============================================================================
# Response DTOs
# ============================================================================


class UserResponse(BaseModel):
    """Public user details"""

    id: str
    email: str
    first_name: str
    last_name: str
    app_language_code: str


class UserEventsResponse(BaseModel):
    """Event ids the user is linked to, oldest first"""

    created_events: List[str]
    registered_events: List[str]
    event_admin: List[str]

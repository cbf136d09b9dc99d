"""
User Management Use Cases

All user-related business logic.
"""

from .dtos import RegisterUserCommand, UserEventsResponse, UserResponse
from .list_user_events_use_case import ListUserEventsUseCase
from .register_user_use_case import RegisterUserUseCase

__all__ = [
    "RegisterUserUseCase",
    "ListUserEventsUseCase",
    "RegisterUserCommand",
    "UserResponse",
    "UserEventsResponse",
]

"""
Use Cases

Use cases are organized into domain folders:
- users/: User accounts and event back-references
- organizations/: Organization management
- events/: Event creation, lookup and registration
"""

from .events import CreateEventUseCase, GetEventUseCase, RegisterForEventUseCase
from .organizations import CreateOrganizationUseCase, JoinOrganizationUseCase
from .users import ListUserEventsUseCase, RegisterUserUseCase

__all__ = [
    # Users
    "RegisterUserUseCase",
    "ListUserEventsUseCase",
    # Organizations
    "CreateOrganizationUseCase",
    "JoinOrganizationUseCase",
    # Events
    "CreateEventUseCase",
    "GetEventUseCase",
    "RegisterForEventUseCase",
]

"""
Event Use Cases

Event creation, lookup and registration.
"""

from .create_event_use_case import CreateEventUseCase
from .dtos import EventInput, EventResponse, RegistrantInfo
from .get_event_use_case import GetEventUseCase
from .register_for_event_use_case import RegisterForEventUseCase

__all__ = [
    "CreateEventUseCase",
    "GetEventUseCase",
    "RegisterForEventUseCase",
    "EventInput",
    "EventResponse",
    "RegistrantInfo",
]

"""
Community Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import MembershipRole, Recurrence

# Export all entities
from .user import User
from .organization import Organization
from .membership import OrganizationMembership
from .event import Event
from .event_admin import EventAdmin
from .event_registrant import EventRegistrant

__all__ = [
    # Enums
    "MembershipRole",
    "Recurrence",
    # Entities
    "User",
    "Organization",
    "OrganizationMembership",
    "Event",
    "EventAdmin",
    "EventRegistrant",
]

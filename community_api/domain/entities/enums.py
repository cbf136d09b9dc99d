"""
Community Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class MembershipRole(str, Enum):
    """User role within an organization"""

    admin = "admin"
    member = "member"


class Recurrence(str, Enum):
    """How often an event repeats"""

    once = "ONCE"
    daily = "DAILY"
    weekly = "WEEKLY"
    monthly = "MONTHLY"
    yearly = "YEARLY"

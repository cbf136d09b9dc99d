"""
Error codes returned by use cases.

Codes are stable identifiers; clients map them to localized messages.
"""

USER_NOT_FOUND = "USER_NOT_FOUND"
USER_NOT_AUTHORIZED = "USER_NOT_AUTHORIZED"
USER_ALREADY_MEMBER = "USER_ALREADY_MEMBER"
USER_ALREADY_REGISTERED = "USER_ALREADY_REGISTERED"
EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"

ORGANIZATION_NOT_FOUND = "ORGANIZATION_NOT_FOUND"
ORGANIZATION_NOT_AUTHORIZED = "ORGANIZATION_NOT_AUTHORIZED"

EVENT_NOT_FOUND = "EVENT_NOT_FOUND"

INVALID_ORGANIZATION_ID = "INVALID_ORGANIZATION_ID"
INVALID_EVENT_ID = "INVALID_EVENT_ID"
INVALID_EVENT_INPUT = "INVALID_EVENT_INPUT"

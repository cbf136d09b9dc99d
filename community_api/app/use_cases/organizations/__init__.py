"""
Organization Management Use Cases
"""

from .create_organization_use_case import CreateOrganizationUseCase
from .dtos import CreateOrganizationCommand, OrganizationResponse
from .join_organization_use_case import JoinOrganizationUseCase

__all__ = [
    "CreateOrganizationUseCase",
    "JoinOrganizationUseCase",
    "CreateOrganizationCommand",
    "OrganizationResponse",
]

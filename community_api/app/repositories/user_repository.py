from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from community_api.domain.entities import User


class EmailAlreadyExistsError(Exception):
    """Raised by create when the email is already taken"""


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Create a new user

        Raises:
            EmailAlreadyExistsError: a user with the same email exists
        """
        pass

"""
Register User Use Case

Creates a user account with a bcrypt-hashed password.
"""

import bcrypt

from community_api.app.repositories.user_repository import EmailAlreadyExistsError
from community_api.app.services.unit_of_work import UnitOfWork
from community_api.constants import EMAIL_ALREADY_EXISTS
from community_api.domain.entities import User
from community_api.libs.result import Error, Result, Return

from .dtos import RegisterUserCommand, UserResponse


class RegisterUserUseCase:
    """
    Register User Use Case

    Business Logic:
    1. Reject duplicate email (EMAIL_ALREADY_EXISTS)
    2. Hash password with bcrypt cost factor 12
    3. Create User
    4. Commit and return public details
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RegisterUserCommand) -> Result[UserResponse]:
        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error(EMAIL_ALREADY_EXISTS, "Email already registered")
                )

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"), bcrypt.gensalt(12)
            )

            user = User(
                email=command.email,
                password_hash=password_hash.decode("utf-8"),
                first_name=command.first_name,
                last_name=command.last_name,
                app_language_code=command.app_language_code,
            )
            try:
                user = await self.uow.users.create(user)
            except EmailAlreadyExistsError:
                # Lost a race with a concurrent registration
                await self.uow.rollback()
                return Return.err(
                    Error(EMAIL_ALREADY_EXISTS, "Email already registered")
                )

            await self.uow.commit()

            return Return.ok(
                UserResponse(
                    id=str(user.id),
                    email=user.email,
                    first_name=user.first_name,
                    last_name=user.last_name,
                    app_language_code=user.app_language_code,
                )
            )

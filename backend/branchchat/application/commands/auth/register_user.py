"""
Register User Command.

Steps:
1. Require both username and password
2. Reject a taken username before paying for the hash
3. Hash the password (bcrypt via PasswordHasher port)
4. Add the user; the repository re-checks uniqueness under its write lock
"""

import logging
from dataclasses import dataclass
from typing import Optional

from branchchat.application.common.interfaces import Command, CommandHandler
from branchchat.domain.entities.user import User
from branchchat.domain.exceptions import DomainValidationError, DuplicateUsernameError
from branchchat.domain.ports.password_hasher import PasswordHasher
from branchchat.domain.ports.repositories import UserRepository
from branchchat.domain.value_objects.user_id import UserId
from branchchat.domain.value_objects.username import Username

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegisterUserCommand(Command[UserId]):
    username: Optional[str]
    password: Optional[str]


class RegisterUserHandler(CommandHandler[UserId]):
    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        self._user_repository = user_repository
        self._password_hasher = password_hasher

    async def execute(self, command: RegisterUserCommand) -> UserId:
        raw_username = (command.username or "").strip()
        if not raw_username or not command.password:
            raise DomainValidationError("Username and password are required.")

        username = Username(raw_username)
        if await self._user_repository.get_by_username(username):
            raise DuplicateUsernameError()

        password_hash = await self._password_hasher.hash(command.password)
        user = User.create(username=username, password_hash=password_hash)
        await self._user_repository.add(user)

        logger.info(f"User registered: {username.value} ({user.id.value})")
        return user.id

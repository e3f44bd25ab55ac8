"""
Authenticate User Command.

Unknown username and wrong password raise the same InvalidCredentialsError.
On success a session token is issued through the TokenIssuer port.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from branchchat.application.common.interfaces import Command, CommandHandler
from branchchat.domain.exceptions import DomainValidationError, InvalidCredentialsError
from branchchat.domain.ports.password_hasher import PasswordHasher
from branchchat.domain.ports.repositories import UserRepository
from branchchat.domain.ports.token_issuer import TokenIssuer
from branchchat.domain.value_objects.user_id import UserId
from branchchat.domain.value_objects.username import Username

logger = logging.getLogger(__name__)


@dataclass
class AuthenticateUserResult:
    user_id: UserId
    token: str


@dataclass(frozen=True)
class AuthenticateUserCommand(Command[AuthenticateUserResult]):
    username: Optional[str]
    password: Optional[str]


class AuthenticateUserHandler(CommandHandler[AuthenticateUserResult]):
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ):
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._token_issuer = token_issuer

    async def execute(self, command: AuthenticateUserCommand) -> AuthenticateUserResult:
        raw_username = (command.username or "").strip()
        if not raw_username or not command.password:
            raise DomainValidationError("Username and password are required.")

        user = await self._user_repository.get_by_username(Username(raw_username))
        if not user:
            raise InvalidCredentialsError()

        if not await self._password_hasher.verify(command.password, user.password_hash):
            raise InvalidCredentialsError()

        token = self._token_issuer.issue(user)
        logger.info(f"User logged in: {user.username.value}")
        return AuthenticateUserResult(user_id=user.id, token=token)

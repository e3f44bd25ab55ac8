"""Registration and login commands."""

from .register_user import RegisterUserCommand, RegisterUserHandler
from .authenticate_user import (
    AuthenticateUserCommand,
    AuthenticateUserHandler,
    AuthenticateUserResult,
)

__all__ = [
    "RegisterUserCommand",
    "RegisterUserHandler",
    "AuthenticateUserCommand",
    "AuthenticateUserHandler",
    "AuthenticateUserResult",
]

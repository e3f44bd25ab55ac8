"""Password hashing and session token implementations."""

from branchchat.infrastructure.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from branchchat.infrastructure.security.jwt_token_issuer import JwtTokenIssuer

__all__ = [
    "BcryptPasswordHasher",
    "JwtTokenIssuer",
]

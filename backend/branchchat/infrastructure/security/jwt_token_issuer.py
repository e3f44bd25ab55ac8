"""
JWT Token Issuer - Signed, expiring session tokens (HS256).

Claims:
- sub: user id
- username
- iat / exp
- iss / aud from Config
"""

import time
import jwt

from branchchat.domain.entities.user import User
from branchchat.domain.ports.token_issuer import TokenIssuer


class JwtTokenIssuer(TokenIssuer):
    def __init__(
        self,
        secret: str,
        issuer: str,
        audience: str,
        ttl_minutes: int = 720,
    ):
        self._secret = secret
        self._issuer = issuer
        self._audience = audience
        self._ttl_seconds = ttl_minutes * 60

    def issue(self, user: User) -> str:
        now = int(time.time())
        return jwt.encode(
            {
                "sub": user.id.value,
                "username": user.username.value,
                "iat": now,
                "exp": now + self._ttl_seconds,
                "iss": self._issuer,
                "aud": self._audience,
            },
            self._secret,
            algorithm="HS256",
        )

    def decode(self, token: str) -> dict:
        """Verify signature, expiry, issuer and audience; raises jwt.InvalidTokenError."""
        return jwt.decode(
            token,
            self._secret,
            algorithms=["HS256"],
            audience=self._audience,
            issuer=self._issuer,
            options={"require": ["exp", "iat", "aud", "iss", "sub"]},
        )

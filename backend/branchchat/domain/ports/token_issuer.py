"""
Token Issuer Port - Session tokens returned by login.
Implementation: branchchat/infrastructure/security/jwt_token_issuer.py
"""

from abc import ABC, abstractmethod

from branchchat.domain.entities.user import User


class TokenIssuer(ABC):
    @abstractmethod
    def issue(self, user: User) -> str: ...

"""
Password Hasher Port - Salted, deliberately slow password hashing.
Implementation: branchchat/infrastructure/security/bcrypt_password_hasher.py
"""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    @abstractmethod
    async def hash(self, password: str) -> str: ...

    @abstractmethod
    async def verify(self, password: str, password_hash: str) -> bool: ...

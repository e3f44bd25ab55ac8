"""
User Entity - A registered account.
"""

from __future__ import annotations
from dataclasses import dataclass
from uuid import uuid4
from branchchat.domain.value_objects.user_id import UserId
from branchchat.domain.value_objects.username import Username


@dataclass(frozen=True)
class User:
    id: UserId
    username: Username
    password_hash: str

    def __post_init__(self):
        if not self.password_hash:
            raise ValueError("User must have a password hash.")

    @classmethod
    def create(cls, username: Username, password_hash: str) -> User:
        """Factory method to create a new User with a generated ID."""
        return cls(
            id=UserId(str(uuid4())),
            username=username,
            password_hash=password_hash,
        )

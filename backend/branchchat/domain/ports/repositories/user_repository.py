"""
User Repository Port - Interface for user persistence.
Implementation: branchchat/infrastructure/persistence/json_user_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from branchchat.domain.entities.user import User
from branchchat.domain.value_objects.username import Username


class UserRepository(ABC):
    @abstractmethod
    async def get_by_username(self, username: Username) -> Optional[User]: ...

    @abstractmethod
    async def add(self, user: User) -> None:
        """Persist a new user; raises DuplicateUsernameError if the name is taken."""
        ...

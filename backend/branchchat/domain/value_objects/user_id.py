"""
UserId Value Object
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    value: str  # user_id; UUID for new users, legacy stores may hold "1", "2", ...

    def __post_init__(self):
        if not self.value:
            raise ValueError("UserId cannot be empty")

    def __str__(self) -> str:
        return self.value

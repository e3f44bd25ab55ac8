"""
Username Value Object - Unique, case-sensitive login name.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Username:
    value: str

    def __post_init__(self):
        if not self.value or not self.value.strip():
            raise ValueError("Username cannot be empty")
        if self.value != self.value.strip():
            raise ValueError("Username cannot start or end with whitespace")

    def __str__(self) -> str:
        return self.value

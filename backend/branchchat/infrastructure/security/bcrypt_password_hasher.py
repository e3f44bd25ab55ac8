"""
Bcrypt Password Hasher - Implements PasswordHasher port.

bcrypt is CPU-bound (~tens of ms at cost 10), so both calls run in a worker
thread to keep the event loop responsive.

bcrypt only reads the first 72 bytes of a password. Passwords are cut to
72 UTF-8 bytes before both hashing and checking, so long passwords register
and log in the same way existing "$2a$" hashes in the user store were made.
"""

import asyncio
import bcrypt

from branchchat.domain.ports.password_hasher import PasswordHasher

MAX_PASSWORD_BYTES = 72


def _password_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:MAX_PASSWORD_BYTES]


class BcryptPasswordHasher(PasswordHasher):
    def __init__(self, rounds: int = 10):
        self._rounds = rounds

    def _hash_sync(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(_password_bytes(password), salt).decode("utf-8")

    @staticmethod
    def _verify_sync(password: str, password_hash: str) -> bool:
        # "$2a$" and "$2b$" hashes both verify here.
        try:
            return bcrypt.checkpw(
                _password_bytes(password), password_hash.encode("utf-8")
            )
        except ValueError:
            # Malformed stored hash
            return False

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(self._hash_sync, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(self._verify_sync, password, password_hash)

"""
Password hashing for user accounts.

Responsibilities:
- Hash passwords with Argon2id; only the encoded hash is ever persisted
- Verify a candidate password against a stored hash
- Keep the one-way function pluggable behind ``PasswordHashing``
"""
from __future__ import annotations

from typing import Optional, Protocol

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from argon2.low_level import Type

from legalcase.utils.settings import get_settings


class PasswordHashing(Protocol):
    def hash(self, password: str) -> str: ...

    def verify(self, password: str, encoded_hash: str) -> bool: ...


class Argon2PasswordHashing:
    """Argon2id hashing; cost parameters default to the runtime settings."""

    def __init__(
        self,
        *,
        time_cost: Optional[int] = None,
        memory_cost: Optional[int] = None,
        parallelism: Optional[int] = None,
    ):
        settings = get_settings()
        self._hasher = PasswordHasher(
            time_cost=time_cost or settings.argon2_time_cost,
            memory_cost=memory_cost or settings.argon2_memory_cost,
            parallelism=parallelism or settings.argon2_parallelism,
            hash_len=32,
            type=Type.ID,
        )

    def hash(self, password: str) -> str:
        return self._hasher.hash(password)

    def verify(self, password: str, encoded_hash: str) -> bool:
        if not password or not encoded_hash:
            return False
        try:
            return self._hasher.verify(encoded_hash, password)
        except (VerificationError, InvalidHashError):
            return False

    def needs_rehash(self, encoded_hash: str) -> bool:
        return self._hasher.check_needs_rehash(encoded_hash)


_default_hashing: Optional[Argon2PasswordHashing] = None


def default_password_hashing() -> Argon2PasswordHashing:
    global _default_hashing
    if _default_hashing is None:
        _default_hashing = Argon2PasswordHashing()
    return _default_hashing

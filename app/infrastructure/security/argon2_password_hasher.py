"""Argon2id implementation of the PasswordHasher port (argon2-cffi)."""

from argon2 import PasswordHasher as _Argon2

from app.application.interfaces import PasswordHasher


class Argon2PasswordHasher(PasswordHasher):
    """Salted one-way hashing; hashes embed their own parameters and salt."""

    def __init__(self, time_cost: int = 2, memory_cost: int = 65536, parallelism: int = 2):
        self._hasher = _Argon2(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
        )

    def hash(self, plain_password: str) -> str:
        return self._hasher.hash(plain_password)

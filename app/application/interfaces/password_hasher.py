"""Abstract password hashing port — salted, one-way."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):

    @abstractmethod
    def hash(self, plain_password: str) -> str:
        """Return a salted hash of the given password."""
        ...

"""Abstract repository interface (port) for User persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import User


class UserRepository(ABC):
    """Port for user persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        """Retrieve a user by exact email match."""
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user.

        Raises DuplicateEntityError when the email is already taken.
        """
        ...

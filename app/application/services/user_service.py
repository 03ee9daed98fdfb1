"""Application service (use case) for User operations."""

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from app.application.interfaces import PasswordHasher, UserRepository
from app.application.schemas import UserCreate
from app.domain.entities import User
from app.domain.exceptions import DuplicateEntityError, PersistenceError
from app.domain.result import ErrorKind, Failure, Result, Success

logger = logging.getLogger(__name__)


class UserService:
    """Looks up users and registers new ones with hashed passwords."""

    def __init__(self, repository: UserRepository, password_hasher: PasswordHasher):
        self._repository = repository
        self._hasher = password_hasher

    async def get_user(self, email: str) -> Result[User]:
        user = await self._repository.get_by_email(email)
        if user is None:
            return Failure.of(ErrorKind.NOT_FOUND, "No such user")
        return Success(user)

    async def create_user(self, data: Mapping[str, Any]) -> Result[User]:
        try:
            payload = UserCreate.model_validate(data)
        except ValidationError as exc:
            details = exc.errors(include_url=False, include_context=False, include_input=False)
            return Failure.of(ErrorKind.INVALID_INPUT, "Invalid user data", details=details)

        # Hashing is CPU-bound; keep it off the event loop
        loop = asyncio.get_running_loop()
        password_hash = await loop.run_in_executor(None, self._hasher.hash, payload.password)

        user = User(email=payload.email, password_hash=password_hash)
        try:
            created = await self._repository.create(user)
        except DuplicateEntityError:
            return Failure.of(ErrorKind.CONFLICT, "User with given email already exists")
        except PersistenceError:
            logger.exception("Could not store user %s", payload.email)
            return Failure.of(ErrorKind.PERSISTENCE, "Unable to create user")

        logger.info("Created user %s", created.email)
        return Success(created)

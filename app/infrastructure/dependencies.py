"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.application.interfaces import PasswordHasher
from app.application.services import ListingService, UserService
from app.infrastructure.database.session import get_db_session
from app.infrastructure.database.repositories import (
    SQLAlchemyCityRepository,
    SQLAlchemyListingRepository,
    SQLAlchemySectionRepository,
    SQLAlchemyUserRepository,
)
from app.infrastructure.security import Argon2PasswordHasher


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Process-wide hasher configured from settings."""
    settings = get_settings()
    return Argon2PasswordHasher(
        time_cost=settings.password_hash_time_cost,
        memory_cost=settings.password_hash_memory_cost,
        parallelism=settings.password_hash_parallelism,
    )


async def get_listing_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ListingService, None]:
    """Provides a ListingService with listing, reference and user repositories wired up."""
    yield ListingService(
        listing_repository=SQLAlchemyListingRepository(session),
        section_repository=SQLAlchemySectionRepository(session),
        city_repository=SQLAlchemyCityRepository(session),
        user_repository=SQLAlchemyUserRepository(session),
    )


async def get_user_service(
    session: AsyncSession = Depends(get_db_session),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> AsyncGenerator[UserService, None]:
    """Provides a UserService with its repository and password hasher."""
    yield UserService(SQLAlchemyUserRepository(session), password_hasher)

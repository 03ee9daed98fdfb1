from .listing_repository import SQLAlchemyListingRepository
from .user_repository import SQLAlchemyUserRepository
from .reference_repository import SQLAlchemySectionRepository, SQLAlchemyCityRepository

__all__ = [
    "SQLAlchemyListingRepository",
    "SQLAlchemyUserRepository",
    "SQLAlchemySectionRepository",
    "SQLAlchemyCityRepository",
]

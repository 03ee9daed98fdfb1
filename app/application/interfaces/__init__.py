from .listing_repository import ListingRepository, ListingCriteria
from .user_repository import UserRepository
from .reference_repository import SectionRepository, CityRepository
from .password_hasher import PasswordHasher

__all__ = [
    "ListingRepository",
    "ListingCriteria",
    "UserRepository",
    "SectionRepository",
    "CityRepository",
    "PasswordHasher",
]

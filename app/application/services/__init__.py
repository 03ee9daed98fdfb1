from .listing_service import ListingService
from .user_service import UserService
from .reference_seeder import ReferenceDataSeeder

__all__ = [
    "ListingService",
    "UserService",
    "ReferenceDataSeeder",
]

from .listing import Listing
from .user import User
from .reference import Section, City

__all__ = [
    "Listing",
    "User",
    "Section",
    "City",
]

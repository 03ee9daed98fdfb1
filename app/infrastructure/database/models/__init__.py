from .listing import ListingModel
from .user import UserModel
from .reference import SectionModel, CityModel

__all__ = [
    "ListingModel",
    "UserModel",
    "SectionModel",
    "CityModel",
]

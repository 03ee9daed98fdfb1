from .listing import (
    DATE_FORMAT,
    MAX_ID,
    ListingCreate,
    ListingUpdate,
    ListingFilter,
    ListingResponse,
    ListingEnvelope,
    ListingCollection,
    ListingCollectionEnvelope,
)
from .user import UserCreate, UserResponse, UserEnvelope
from .errors import ErrorDetail, ErrorResponse

__all__ = [
    "DATE_FORMAT",
    "MAX_ID",
    "ListingCreate",
    "ListingUpdate",
    "ListingFilter",
    "ListingResponse",
    "ListingEnvelope",
    "ListingCollection",
    "ListingCollectionEnvelope",
    "UserCreate",
    "UserResponse",
    "UserEnvelope",
    "ErrorDetail",
    "ErrorResponse",
]

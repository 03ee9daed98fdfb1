"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime

from app.domain.entities import Listing


@dataclass(frozen=True)
class ListingCriteria:
    """Conjunctive listing filter; a ``None`` field imposes no constraint."""

    section_id: int | None = None
    city_id: int | None = None
    published_since: datetime | None = None
    excluded_user_id: int | None = None


class ListingRepository(ABC):
    """Port for listing persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, listing_id: int) -> Listing | None:
        """Retrieve a single listing (with owner email) by its ID."""
        ...

    @abstractmethod
    async def find_by_criteria(self, criteria: ListingCriteria) -> list[Listing]:
        """Retrieve listings matching every given constraint, newest first."""
        ...

    @abstractmethod
    async def create(self, listing: Listing) -> Listing:
        """Persist a new listing and return it with the generated ID."""
        ...

    @abstractmethod
    async def update(self, listing: Listing) -> Listing:
        """Update an existing listing."""
        ...

    @abstractmethod
    async def delete(self, listing_id: int) -> bool:
        """Delete a listing. Returns True if deleted, False if not found."""
        ...

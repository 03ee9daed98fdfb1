"""Application service (use case) for Listing operations."""

import logging
from collections.abc import Callable, Mapping
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Any

from pydantic import ValidationError

from app.application.interfaces import (
    CityRepository,
    ListingCriteria,
    ListingRepository,
    SectionRepository,
    UserRepository,
)
from app.application.schemas import MAX_ID, ListingCreate, ListingFilter, ListingUpdate
from app.domain.entities import Listing
from app.domain.exceptions import EntityNotFoundError, PersistenceError
from app.domain.result import ErrorKind, Failure, Result, Success

logger = logging.getLogger(__name__)

INVALID_PERIOD = "Expiration date must not be earlier than publication date"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _validation_failure(message: str, exc: ValidationError) -> Failure:
    details = exc.errors(include_url=False, include_context=False, include_input=False)
    return Failure.of(ErrorKind.INVALID_INPUT, message, details=details)


class ListingService:
    """Validates listing payloads and maps them onto Listing entities.

    Every public method returns a ``Result``: recoverable problems (bad
    payloads, unknown sections or cities, storage write failures) come back
    as ``Failure`` values rather than exceptions.
    """

    def __init__(
        self,
        listing_repository: ListingRepository,
        section_repository: SectionRepository,
        city_repository: CityRepository,
        user_repository: UserRepository,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._listings = listing_repository
        self._sections = section_repository
        self._cities = city_repository
        self._users = user_repository
        self._clock = clock

    async def get_listing(self, listing_id: int) -> Result[Listing]:
        # Ids outside the column range cannot exist
        listing = None
        if 1 <= listing_id <= MAX_ID:
            listing = await self._listings.get_by_id(listing_id)
        if listing is None:
            return Failure.of(ErrorKind.NOT_FOUND, "Listing not found")
        return Success(listing)

    async def create_listing(
        self, data: Mapping[str, Any], owner_email: str | None
    ) -> Result[Listing]:
        """Create a listing owned by the user with ``owner_email``."""
        try:
            payload = ListingCreate.model_validate(data)
        except ValidationError as exc:
            return _validation_failure("Invalid listing data", exc)

        owner = await self._users.get_by_email(owner_email) if owner_email else None
        if owner is None:
            return Failure.of(ErrorKind.INVALID_INPUT, "Invalid user")

        failure = await self._check_references(payload.section_id, payload.city_id)
        if failure is not None:
            return failure

        listing = Listing(
            section_id=payload.section_id,
            title=payload.title,
            zip_code=payload.zip_code,
            city_id=payload.city_id,
            description=payload.description,
            publication_date=payload.publication_date,
            expiration_date=payload.expiration_date,
            user_id=owner.id,
            user_email=owner.email,
        )
        if not listing.has_valid_period():
            return Failure.of(ErrorKind.INVALID_INPUT, INVALID_PERIOD)

        try:
            created = await self._listings.create(listing)
        except PersistenceError:
            logger.exception("Could not store listing '%s'", listing.title)
            return Failure.of(ErrorKind.PERSISTENCE, "Unable to create listing")

        logger.info("Created listing %s for %s", created.id, owner.email)
        return Success(created)

    async def get_listings(self, filters: Mapping[str, Any]) -> Result[list[Listing]]:
        """Return listings matching every supplied filter key, newest first.

        Supported keys: ``section_id``, ``city_id``, ``days_back`` (published
        within the last N days, boundary included) and ``excluded_user_id``.
        """
        try:
            params = ListingFilter.model_validate(dict(filters))
        except ValidationError as exc:
            return _validation_failure("Invalid filter", exc)

        published_since = None
        if params.days_back is not None:
            published_since = self._clock() - timedelta(days=params.days_back)

        criteria = ListingCriteria(
            section_id=params.section_id,
            city_id=params.city_id,
            published_since=published_since,
            excluded_user_id=params.excluded_user_id,
        )
        return Success(await self._listings.find_by_criteria(criteria))

    async def update_listing(
        self, listing: Listing, data: Mapping[str, Any]
    ) -> Result[Listing]:
        """Overwrite only the fields present in ``data``."""
        try:
            changes = ListingUpdate.model_validate(data)
        except ValidationError as exc:
            return _validation_failure("Invalid listing data", exc)

        fields = changes.model_dump(exclude_unset=True)
        failure = await self._check_references(
            fields.get("section_id"), fields.get("city_id")
        )
        if failure is not None:
            return failure

        # Work on a copy so the caller's entity is untouched on failure
        updated = replace(listing)
        updated.update(**fields)
        if not updated.has_valid_period():
            return Failure.of(ErrorKind.INVALID_INPUT, INVALID_PERIOD)

        try:
            saved = await self._listings.update(updated)
        except EntityNotFoundError:
            return Failure.of(ErrorKind.NOT_FOUND, "Listing not found")
        except PersistenceError:
            logger.exception("Could not update listing %s", listing.id)
            return Failure.of(ErrorKind.PERSISTENCE, "Unable to update listing")
        return Success(saved)

    async def delete_listing(self, listing: Listing) -> Result[bool]:
        try:
            deleted = await self._listings.delete(listing.id)
        except PersistenceError:
            logger.exception("Could not delete listing %s", listing.id)
            return Failure.of(ErrorKind.PERSISTENCE, "Unable to delete listing")

        if not deleted:
            return Failure.of(ErrorKind.NOT_FOUND, "Listing not found")
        logger.info("Deleted listing %s", listing.id)
        return Success(True)

    async def _check_references(
        self, section_id: int | None, city_id: int | None
    ) -> Failure | None:
        if section_id is not None and await self._sections.get_by_id(section_id) is None:
            return Failure.of(ErrorKind.INVALID_INPUT, "Invalid section")
        if city_id is not None and await self._cities.get_by_id(city_id) is None:
            return Failure.of(ErrorKind.INVALID_INPUT, "Invalid city")
        return None

"""Pydantic DTOs (Data Transfer Objects) for the Listing feature."""

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field, field_validator

from app.domain.entities import Listing

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Primary keys are 32-bit INTEGER columns
MAX_ID = 2_147_483_647
MAX_DAYS_BACK = 36_500


def _to_naive_utc(value: datetime) -> datetime:
    """Aware datetimes are converted to UTC; naive ones are taken as UTC already."""
    if value.tzinfo is not None:
        try:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        except OverflowError:
            raise ValueError("Date is out of range once converted to UTC") from None
    return value


class ListingCreate(BaseModel):
    """Schema for creating a new listing."""

    section_id: int = Field(..., ge=1, le=MAX_ID, examples=[1])
    title: str = Field(..., min_length=1, max_length=255, examples=["Sofa"])
    zip_code: str = Field(..., min_length=1, max_length=20, examples=["10001"])
    city_id: int = Field(..., ge=1, le=MAX_ID, examples=[2])
    description: str = Field(..., examples=["Free, pick up only"])
    publication_date: datetime = Field(..., examples=["2024-05-01 10:00:00"])
    expiration_date: datetime = Field(..., examples=["2024-06-01 10:00:00"])

    model_config = {"coerce_numbers_to_str": True}

    @field_validator("publication_date", "expiration_date")
    @classmethod
    def _normalize_dates(cls, value: datetime) -> datetime:
        return _to_naive_utc(value)


class ListingUpdate(BaseModel):
    """Schema for updating an existing listing — all fields optional, none nullable."""

    section_id: int | None = Field(None, ge=1, le=MAX_ID)
    title: str | None = Field(None, min_length=1, max_length=255)
    zip_code: str | None = Field(None, min_length=1, max_length=20)
    city_id: int | None = Field(None, ge=1, le=MAX_ID)
    description: str | None = None
    publication_date: datetime | None = None
    expiration_date: datetime | None = None

    model_config = {"coerce_numbers_to_str": True}

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        # Defaults are not validated, so None here was sent explicitly
        if value is None:
            raise ValueError("Field may not be null")
        return value

    @field_validator("publication_date", "expiration_date")
    @classmethod
    def _normalize_dates(cls, value: datetime | None) -> datetime | None:
        return _to_naive_utc(value) if value is not None else None


class ListingFilter(BaseModel):
    """Query-string filter for listing searches. Every key is optional."""

    section_id: int | None = Field(None, ge=1, le=MAX_ID)
    city_id: int | None = Field(None, ge=1, le=MAX_ID)
    days_back: int | None = Field(None, ge=0, le=MAX_DAYS_BACK)
    excluded_user_id: int | None = Field(None, ge=1, le=MAX_ID)

    @field_validator("*", mode="before")
    @classmethod
    def _blank_as_missing(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ListingResponse(BaseModel):
    """Schema returned to the client.

    ``user_id`` carries the owner's email, matching the published API.
    """

    id: int
    section_id: int
    title: str
    zip_code: str
    city_id: int
    description: str
    publication_date: str
    expiration_date: str
    user_id: str | None

    @classmethod
    def from_entity(cls, listing: Listing) -> "ListingResponse":
        return cls(
            id=listing.id,
            section_id=listing.section_id,
            title=listing.title,
            zip_code=listing.zip_code,
            city_id=listing.city_id,
            description=listing.description,
            publication_date=listing.publication_date.strftime(DATE_FORMAT),
            expiration_date=listing.expiration_date.strftime(DATE_FORMAT),
            user_id=listing.user_email,
        )


class ListingEnvelope(BaseModel):
    data: ListingResponse


class ListingCollection(BaseModel):
    listings: list[ListingResponse]


class ListingCollectionEnvelope(BaseModel):
    data: ListingCollection

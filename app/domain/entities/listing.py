"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Listing:
    """Core domain entity representing a classified advertisement.

    ``user_email`` is the owner's email, resolved by the repository together
    with the listing so callers never traverse the User relation lazily.
    """

    section_id: int
    title: str
    zip_code: str
    city_id: int
    description: str
    publication_date: datetime
    expiration_date: datetime
    user_id: int
    id: int | None = None
    user_email: str | None = None

    def update(
        self,
        section_id: int | None = None,
        title: str | None = None,
        zip_code: str | None = None,
        city_id: int | None = None,
        description: str | None = None,
        publication_date: datetime | None = None,
        expiration_date: datetime | None = None,
    ) -> None:
        """Overwrite only the fields that were given."""
        if section_id is not None:
            self.section_id = section_id
        if title is not None:
            self.title = title
        if zip_code is not None:
            self.zip_code = zip_code
        if city_id is not None:
            self.city_id = city_id
        if description is not None:
            self.description = description
        if publication_date is not None:
            self.publication_date = publication_date
        if expiration_date is not None:
            self.expiration_date = expiration_date

    def has_valid_period(self) -> bool:
        return self.expiration_date >= self.publication_date

"""In-memory fakes of the repository and hasher ports, shared by unit and API tests."""

from dataclasses import replace

from app.application.interfaces import (
    CityRepository,
    ListingCriteria,
    ListingRepository,
    PasswordHasher,
    SectionRepository,
    UserRepository,
)
from app.domain.entities import City, Listing, Section, User
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError, PersistenceError


class FakePasswordHasher(PasswordHasher):
    """Reversible stand-in; only the service wiring is under test."""

    def hash(self, plain_password: str) -> str:
        return f"hashed:{plain_password}"


class FakeUserRepository(UserRepository):
    """In-memory user repository enforcing email uniqueness."""

    def __init__(self):
        self._users: dict[int, User] = {}
        self._next_id = 1
        self.fail_writes = False

    def owner(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    async def get_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    async def create(self, user: User) -> User:
        if self.fail_writes:
            raise PersistenceError("User", "create", "database unavailable")
        if await self.get_by_email(user.email) is not None:
            raise DuplicateEntityError("User", "email", user.email)
        user.id = self._next_id
        self._next_id += 1
        self._users[user.id] = user
        return user


class FakeSectionRepository(SectionRepository):

    def __init__(self, names: list[str] | None = None):
        self._sections: dict[int, Section] = {}
        for name in names or []:
            section = Section(name=name, id=len(self._sections) + 1)
            self._sections[section.id] = section

    async def get_by_id(self, section_id: int) -> Section | None:
        return self._sections.get(section_id)

    async def get_by_name(self, name: str) -> Section | None:
        return next((s for s in self._sections.values() if s.name == name), None)

    async def create(self, section: Section) -> Section:
        section.id = len(self._sections) + 1
        self._sections[section.id] = section
        return section


class FakeCityRepository(CityRepository):

    def __init__(self, names: list[str] | None = None):
        self._cities: dict[int, City] = {}
        for name in names or []:
            city = City(name=name, id=len(self._cities) + 1)
            self._cities[city.id] = city

    async def get_by_id(self, city_id: int) -> City | None:
        return self._cities.get(city_id)

    async def get_by_name(self, name: str) -> City | None:
        return next((c for c in self._cities.values() if c.name == name), None)

    async def create(self, city: City) -> City:
        city.id = len(self._cities) + 1
        self._cities[city.id] = city
        return city


class FakeListingRepository(ListingRepository):
    """In-memory listing repository; returns copies like a real store would."""

    def __init__(self, users: FakeUserRepository):
        self._users = users
        self._listings: dict[int, Listing] = {}
        self._next_id = 1
        self.fail_writes = False

    async def _with_owner(self, listing: Listing) -> Listing:
        owner = self._users.owner(listing.user_id)
        return replace(listing, user_email=owner.email if owner else None)

    async def get_by_id(self, listing_id: int) -> Listing | None:
        listing = self._listings.get(listing_id)
        return await self._with_owner(listing) if listing else None

    async def find_by_criteria(self, criteria: ListingCriteria) -> list[Listing]:
        matches = [
            listing
            for listing in self._listings.values()
            if (criteria.section_id is None or listing.section_id == criteria.section_id)
            and (criteria.city_id is None or listing.city_id == criteria.city_id)
            and (
                criteria.published_since is None
                or listing.publication_date >= criteria.published_since
            )
            and (
                criteria.excluded_user_id is None
                or listing.user_id != criteria.excluded_user_id
            )
        ]
        matches.sort(key=lambda l: (l.publication_date, l.id), reverse=True)
        return [await self._with_owner(listing) for listing in matches]

    async def create(self, listing: Listing) -> Listing:
        if self.fail_writes:
            raise PersistenceError("Listing", "create", "database unavailable")
        stored = replace(listing, id=self._next_id)
        self._next_id += 1
        self._listings[stored.id] = stored
        return await self._with_owner(stored)

    async def update(self, listing: Listing) -> Listing:
        if listing.id not in self._listings:
            raise EntityNotFoundError("Listing", listing.id)
        if self.fail_writes:
            raise PersistenceError("Listing", "update", "database unavailable")
        self._listings[listing.id] = replace(listing)
        return await self._with_owner(listing)

    async def delete(self, listing_id: int) -> bool:
        if self.fail_writes:
            raise PersistenceError("Listing", "delete", "database unavailable")
        return self._listings.pop(listing_id, None) is not None

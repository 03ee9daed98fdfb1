"""Abstract repository interfaces (ports) for sections and cities."""

from abc import ABC, abstractmethod

from app.domain.entities import City, Section


class SectionRepository(ABC):
    """Port for section lookups and seeding."""

    @abstractmethod
    async def get_by_id(self, section_id: int) -> Section | None:
        ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Section | None:
        ...

    @abstractmethod
    async def create(self, section: Section) -> Section:
        ...


class CityRepository(ABC):
    """Port for city lookups and seeding."""

    @abstractmethod
    async def get_by_id(self, city_id: int) -> City | None:
        ...

    @abstractmethod
    async def get_by_name(self, name: str) -> City | None:
        ...

    @abstractmethod
    async def create(self, city: City) -> City:
        ...

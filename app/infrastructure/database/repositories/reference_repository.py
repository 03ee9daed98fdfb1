"""Concrete section and city repositories backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import CityRepository, SectionRepository
from app.domain.entities import City, Section
from app.infrastructure.database.models import CityModel, SectionModel
from app.infrastructure.database.repositories._flush import flush_or_raise


class SQLAlchemySectionRepository(SectionRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, section_id: int) -> Section | None:
        model = await self._session.get(SectionModel, section_id)
        return Section(id=model.id, name=model.name) if model else None

    async def get_by_name(self, name: str) -> Section | None:
        result = await self._session.execute(
            select(SectionModel).where(SectionModel.name == name)
        )
        model = result.scalar_one_or_none()
        return Section(id=model.id, name=model.name) if model else None

    async def create(self, section: Section) -> Section:
        model = SectionModel(name=section.name)
        self._session.add(model)
        await flush_or_raise(
            self._session, "Section", "create", unique_field=("name", section.name)
        )
        return Section(id=model.id, name=model.name)


class SQLAlchemyCityRepository(CityRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, city_id: int) -> City | None:
        model = await self._session.get(CityModel, city_id)
        return City(id=model.id, name=model.name) if model else None

    async def get_by_name(self, name: str) -> City | None:
        result = await self._session.execute(
            select(CityModel).where(CityModel.name == name)
        )
        model = result.scalar_one_or_none()
        return City(id=model.id, name=model.name) if model else None

    async def create(self, city: City) -> City:
        model = CityModel(name=city.name)
        self._session.add(model)
        await flush_or_raise(
            self._session, "City", "create", unique_field=("name", city.name)
        )
        return City(id=model.id, name=model.name)

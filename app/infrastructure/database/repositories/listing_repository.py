"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import ListingCriteria, ListingRepository
from app.domain.entities import Listing
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.database.models import ListingModel, UserModel
from app.infrastructure.database.repositories._flush import flush_or_raise


class SQLAlchemyListingRepository(ListingRepository):
    """Implements the ListingRepository port using SQLAlchemy async sessions.

    Reads join the owning user so each entity carries the owner's email.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ListingModel, user_email: str | None) -> Listing:
        """Map ORM model → domain entity."""
        return Listing(
            id=model.id,
            section_id=model.section_id,
            title=model.title,
            zip_code=model.zip_code,
            city_id=model.city_id,
            description=model.description,
            publication_date=model.publication_date,
            expiration_date=model.expiration_date,
            user_id=model.user_id,
            user_email=user_email,
        )

    def _to_model(self, entity: Listing) -> ListingModel:
        """Map domain entity → ORM model (for creation)."""
        return ListingModel(
            section_id=entity.section_id,
            title=entity.title,
            zip_code=entity.zip_code,
            city_id=entity.city_id,
            description=entity.description,
            publication_date=entity.publication_date,
            expiration_date=entity.expiration_date,
            user_id=entity.user_id,
        )

    def _select_with_owner(self) -> Select:
        return select(ListingModel, UserModel.email).join(
            UserModel, UserModel.id == ListingModel.user_id
        )

    async def get_by_id(self, listing_id: int) -> Listing | None:
        stmt = self._select_with_owner().where(ListingModel.id == listing_id)
        row = (await self._session.execute(stmt)).first()
        if row is None:
            return None
        model, email = row
        return self._to_entity(model, email)

    async def find_by_criteria(self, criteria: ListingCriteria) -> list[Listing]:
        stmt = self._select_with_owner()

        if criteria.section_id is not None:
            stmt = stmt.where(ListingModel.section_id == criteria.section_id)
        if criteria.city_id is not None:
            stmt = stmt.where(ListingModel.city_id == criteria.city_id)
        if criteria.published_since is not None:
            stmt = stmt.where(ListingModel.publication_date >= criteria.published_since)
        if criteria.excluded_user_id is not None:
            stmt = stmt.where(ListingModel.user_id != criteria.excluded_user_id)

        stmt = stmt.order_by(
            ListingModel.publication_date.desc(), ListingModel.id.desc()
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model, email) for model, email in result.all()]

    async def create(self, listing: Listing) -> Listing:
        model = self._to_model(listing)
        self._session.add(model)
        await flush_or_raise(self._session, "Listing", "create")
        return self._to_entity(model, listing.user_email)

    async def update(self, listing: Listing) -> Listing:
        model = await self._session.get(ListingModel, listing.id)
        if model is None:
            raise EntityNotFoundError("Listing", listing.id)
        model.section_id = listing.section_id
        model.title = listing.title
        model.zip_code = listing.zip_code
        model.city_id = listing.city_id
        model.description = listing.description
        model.publication_date = listing.publication_date
        model.expiration_date = listing.expiration_date
        await flush_or_raise(self._session, "Listing", "update")
        return self._to_entity(model, listing.user_email)

    async def delete(self, listing_id: int) -> bool:
        model = await self._session.get(ListingModel, listing_id)
        if model is None:
            return False
        await self._session.delete(model)
        await flush_or_raise(self._session, "Listing", "delete")
        return True

"""SQLAlchemy ORM model for the Listing entity."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base


class ListingModel(Base):
    """ORM model — maps to the 'listings' table.

    Dates are stored as naive UTC. Relations are plain foreign keys; the
    repository joins explicitly instead of relying on lazy loading.
    """

    __tablename__ = "listings"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    section_id: Mapped[int] = mapped_column(ForeignKey("sections.id"), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    zip_code: Mapped[str] = mapped_column(String(20), nullable=False)
    city_id: Mapped[int] = mapped_column(ForeignKey("cities.id"), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    publication_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    expiration_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id"), nullable=False)

    __table_args__ = (
        Index("ix_listings_section", "section_id"),
        Index("ix_listings_city", "city_id"),
        Index("ix_listings_user", "user_id"),
        Index("ix_listings_publication_date", "publication_date"),
    )

    def __repr__(self) -> str:
        return f"<ListingModel(id={self.id}, title='{self.title}')>"

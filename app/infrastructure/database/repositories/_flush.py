"""Shared flush helper — translates SQLAlchemy write errors into domain exceptions."""

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.exceptions import DuplicateEntityError, PersistenceError


async def flush_or_raise(
    session: AsyncSession,
    entity_type: str,
    operation: str,
    unique_field: tuple[str, str] | None = None,
) -> None:
    """Flush pending changes, rolling the session back on failure.

    When ``unique_field`` (name, value) is given, an integrity error is
    reported as DuplicateEntityError; otherwise every failure becomes
    PersistenceError.
    """
    try:
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        if unique_field is not None:
            field, value = unique_field
            raise DuplicateEntityError(entity_type, field, value) from exc
        raise PersistenceError(entity_type, operation, str(exc.orig)) from exc
    except SQLAlchemyError as exc:
        await session.rollback()
        raise PersistenceError(entity_type, operation, str(exc)) from exc

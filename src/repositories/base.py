from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from database.models.base import Base


class BaseRepository:
    """Shared session handling for the concrete repositories."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def _add(self, instance: Base) -> Base:
        """Insert a new row and return it refreshed with generated values.

        Raises:
            SQLAlchemyError: Re-raised after the transaction is rolled back.
        """
        try:
            self._session.add(instance)
            await self._session.commit()
        except SQLAlchemyError:
            await self._session.rollback()
            raise
        await self._session.refresh(instance)
        return instance

    async def _commit(self) -> None:
        try:
            await self._session.commit()
        except SQLAlchemyError:
            await self._session.rollback()
            raise

    async def _delete(self, instance: Base) -> None:
        try:
            await self._session.delete(instance)
            await self._session.commit()
        except SQLAlchemyError:
            await self._session.rollback()
            raise

from typing import Optional, Sequence

from sqlalchemy import select

from database.models.bookings import BookingModel
from repositories.base import BaseRepository


class BookingRepository(BaseRepository):
    """Data access for bookings."""

    async def find_all(self) -> Sequence[BookingModel]:
        result = await self._session.execute(
            select(BookingModel).order_by(BookingModel.id)
        )
        return result.scalars().all()

    async def find_by_id(self, booking_id: int) -> Optional[BookingModel]:
        return await self._session.get(BookingModel, booking_id)

    async def find_by_movie_id(self, movie_id: int) -> Sequence[BookingModel]:
        result = await self._session.execute(
            select(BookingModel)
            .where(BookingModel.movie_id == movie_id)
            .order_by(BookingModel.id)
        )
        return result.scalars().all()

    async def save(self, booking: BookingModel) -> BookingModel:
        return await self._add(booking)

    async def delete(self, booking_id: int) -> bool:
        booking = await self.find_by_id(booking_id)
        if booking is None:
            return False
        await self._delete(booking)
        return True

from typing import Optional, Sequence

from sqlalchemy import select, func

from database.models.movies import MovieModel
from repositories.base import BaseRepository


class MovieRepository(BaseRepository):
    """Data access for the movie catalog."""

    async def find_all(self) -> Sequence[MovieModel]:
        result = await self._session.execute(
            select(MovieModel).order_by(MovieModel.id)
        )
        return result.scalars().all()

    async def find_by_id(self, movie_id: int) -> Optional[MovieModel]:
        return await self._session.get(MovieModel, movie_id)

    async def count(self) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(MovieModel)
        )
        return result.scalar_one()

    async def save(self, movie: MovieModel) -> MovieModel:
        return await self._add(movie)

    async def update(self, movie: MovieModel) -> MovieModel:
        await self._commit()
        await self._session.refresh(movie)
        return movie

    async def delete(self, movie_id: int) -> bool:
        """Delete a movie together with its bookings.

        Returns:
            bool: True if the movie existed, False otherwise.
        """
        movie = await self.find_by_id(movie_id)
        if movie is None:
            return False
        await self._delete(movie)
        return True

from decimal import Decimal
from typing import Optional, Sequence

import structlog

from database.models.movies import MovieModel
from repositories.movies import MovieRepository

logger = structlog.get_logger(__name__)

SAMPLE_MOVIES = (
    {
        "title": "Inception",
        "description": "A thief who steals corporate secrets through "
                       "dream-sharing technology",
        "genre": "Sci-Fi",
        "duration_minutes": 148,
        "price": Decimal("12.50"),
    },
    {
        "title": "The Dark Knight",
        "description": "Batman fights the Joker in Gotham City",
        "genre": "Action",
        "duration_minutes": 152,
        "price": Decimal("11.00"),
    },
    {
        "title": "Interstellar",
        "description": "A team of explorers travel through a wormhole in space",
        "genre": "Sci-Fi",
        "duration_minutes": 169,
        "price": Decimal("13.00"),
    },
)


class MovieService:
    """Service for movie catalog operations.

    Field validation lives on the model; this service only orchestrates
    lookups and persistence.
    """

    def __init__(self, movie_repository: MovieRepository) -> None:
        self._movies = movie_repository

    async def get_all_movies(self) -> Sequence[MovieModel]:
        return await self._movies.find_all()

    async def get_movie_by_id(self, movie_id: int) -> Optional[MovieModel]:
        return await self._movies.find_by_id(movie_id)

    async def create_movie(
        self,
        title: str,
        genre: str,
        duration_minutes: int,
        price: Decimal,
        description: Optional[str] = None
    ) -> MovieModel:
        """Validate and persist a new movie.

        Raises:
            DomainValidationError: If any field breaks a movie invariant.
        """
        movie = MovieModel.create(
            title=title,
            description=description,
            genre=genre,
            duration_minutes=duration_minutes,
            price=price
        )
        movie = await self._movies.save(movie)
        logger.info("movie_created", movie_id=movie.id, title=movie.title)
        return movie

    async def update_movie(
        self,
        movie_id: int,
        title: str,
        genre: str,
        duration_minutes: int,
        price: Decimal,
        description: Optional[str] = None
    ) -> Optional[MovieModel]:
        """Replace every editable field of an existing movie.

        Returns:
            Optional[MovieModel]: The updated movie, or None if it does not exist.

        Raises:
            DomainValidationError: If any field breaks a movie invariant.
        """
        movie = await self._movies.find_by_id(movie_id)
        if movie is None:
            return None

        movie.update(
            title=title,
            description=description,
            genre=genre,
            duration_minutes=duration_minutes,
            price=price
        )
        movie = await self._movies.update(movie)
        logger.info("movie_updated", movie_id=movie.id)
        return movie

    async def delete_movie(self, movie_id: int) -> bool:
        deleted = await self._movies.delete(movie_id)
        if deleted:
            logger.info("movie_deleted", movie_id=movie_id)
        return deleted

    async def seed_sample_movies(self) -> int:
        """Insert the sample catalog when no movie exists yet.

        Returns:
            int: Number of movies inserted.
        """
        if await self._movies.count() > 0:
            return 0

        for sample in SAMPLE_MOVIES:
            await self._movies.save(MovieModel.create(**sample))
        logger.info("sample_movies_seeded", count=len(SAMPLE_MOVIES))
        return len(SAMPLE_MOVIES)

from typing import List

from fastapi import APIRouter, status, Depends, HTTPException, Response

from config.dependencies import PolicyRoute, get_movie_service
from exceptions.services import DomainValidationError
from schemas.movies import MovieRequestSchema, MovieSchema
from services.movies import MovieService

router = APIRouter(route_class=PolicyRoute)

MOVIE_NOT_FOUND = "Movie not found"


@router.get(
    "",
    response_model=List[MovieSchema],
    status_code=status.HTTP_200_OK,
    summary="List movies",
    description="Browse the whole movie catalog. No authentication required.",
)
async def get_movies(
    movie_service: MovieService = Depends(get_movie_service)
) -> List[MovieSchema]:
    movies = await movie_service.get_all_movies()
    return [MovieSchema.model_validate(movie) for movie in movies]


@router.get(
    "/{movie_id}",
    response_model=MovieSchema,
    summary="Get movie by ID",
    description="Fetch a single movie. No authentication required.",
    responses={
        404: {
            "description": "Movie not found",
            "content": {
                "application/json": {"example": {"detail": MOVIE_NOT_FOUND}}
            }
        }
    },
)
async def get_movie_by_id(
    movie_id: int,
    movie_service: MovieService = Depends(get_movie_service)
) -> MovieSchema:
    movie = await movie_service.get_movie_by_id(movie_id)
    if movie is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=MOVIE_NOT_FOUND
        )
    return MovieSchema.model_validate(movie)


@router.post(
    "",
    response_model=MovieSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create movie",
    description="Add a movie to the catalog. Requires the ADMIN role.",
    responses={
        400: {
            "description": "Invalid movie data",
            "content": {
                "application/json": {
                    "example": {"detail": "Price must be positive (got: 0)"}
                }
            }
        },
        403: {
            "description": "Caller is not an administrator",
            "content": {
                "application/json": {
                    "example": {"detail": "Admin role required for this operation"}
                }
            }
        }
    },
)
async def create_movie(
    data: MovieRequestSchema,
    movie_service: MovieService = Depends(get_movie_service)
) -> MovieSchema:
    """Create a new movie.

    Args:
        data: Movie fields.
        movie_service: Movie service.

    Returns:
        MovieSchema: The created movie.
    """
    try:
        movie = await movie_service.create_movie(
            title=data.title,
            description=data.description,
            genre=data.genre,
            duration_minutes=data.duration_minutes,
            price=data.price
        )
    except DomainValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )
    return MovieSchema.model_validate(movie)


@router.put(
    "/{movie_id}",
    response_model=MovieSchema,
    summary="Update movie",
    description="Replace every field of a movie. Requires the ADMIN role.",
)
async def update_movie(
    movie_id: int,
    data: MovieRequestSchema,
    movie_service: MovieService = Depends(get_movie_service)
) -> MovieSchema:
    try:
        movie = await movie_service.update_movie(
            movie_id,
            title=data.title,
            description=data.description,
            genre=data.genre,
            duration_minutes=data.duration_minutes,
            price=data.price
        )
    except DomainValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )

    if movie is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=MOVIE_NOT_FOUND
        )
    return MovieSchema.model_validate(movie)


@router.delete(
    "/{movie_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete movie",
    description="Remove a movie and its bookings. Requires the ADMIN role.",
)
async def delete_movie(
    movie_id: int,
    movie_service: MovieService = Depends(get_movie_service)
) -> Response:
    if not await movie_service.delete_movie(movie_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=MOVIE_NOT_FOUND
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)

from typing import List

from fastapi import APIRouter, status, Depends, HTTPException, Response

from config.dependencies import (
    PolicyRoute,
    get_booking_service,
    get_current_identity
)
from exceptions.services import DomainValidationError
from schemas.bookings import BookingCreateRequestSchema, BookingSchema
from security.policy import Identity
from services.bookings import BookingService

router = APIRouter(route_class=PolicyRoute)

BOOKING_NOT_FOUND = "Booking not found"


@router.get(
    "",
    response_model=List[BookingSchema],
    summary="List bookings",
    description="Return every booking. Requires authentication.",
)
async def get_bookings(
    booking_service: BookingService = Depends(get_booking_service)
) -> List[BookingSchema]:
    bookings = await booking_service.get_all_bookings()
    return [BookingSchema.model_validate(booking) for booking in bookings]


@router.get(
    "/movies/{movie_id}",
    response_model=List[BookingSchema],
    summary="List bookings for a movie",
)
async def get_bookings_by_movie(
    movie_id: int,
    booking_service: BookingService = Depends(get_booking_service)
) -> List[BookingSchema]:
    bookings = await booking_service.get_bookings_by_movie_id(movie_id)
    return [BookingSchema.model_validate(booking) for booking in bookings]


@router.get(
    "/{booking_id}",
    response_model=BookingSchema,
    summary="Get booking by ID",
)
async def get_booking_by_id(
    booking_id: int,
    booking_service: BookingService = Depends(get_booking_service)
) -> BookingSchema:
    booking = await booking_service.get_booking_by_id(booking_id)
    if booking is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=BOOKING_NOT_FOUND
        )
    return BookingSchema.model_validate(booking)


@router.post(
    "",
    response_model=BookingSchema,
    status_code=status.HTTP_201_CREATED,
    summary="Create booking",
    description="Book seats for a movie. Customer name and email default to "
                "the authenticated user's when omitted.",
    responses={
        400: {
            "description": "Invalid booking data or unknown movie",
            "content": {
                "application/json": {
                    "example": {"detail": "Movie not found with ID: 999"}
                }
            }
        }
    },
)
async def create_booking(
    data: BookingCreateRequestSchema,
    identity: Identity = Depends(get_current_identity),
    booking_service: BookingService = Depends(get_booking_service)
) -> BookingSchema:
    """Create a booking for the authenticated caller.

    Args:
        data: Booking request.
        identity: Caller decoded from the bearer token.
        booking_service: Booking service.

    Returns:
        BookingSchema: The created booking with its total price.
    """
    customer_name = (
        data.customer_name if data.customer_name is not None else identity.name
    )
    customer_email = (
        data.customer_email if data.customer_email is not None else identity.email
    )

    try:
        booking = await booking_service.create_booking(
            movie_id=data.movie_id,
            customer_name=customer_name,
            customer_email=customer_email,
            number_of_seats=data.number_of_seats
        )
    except DomainValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message
        )
    return BookingSchema.model_validate(booking)


@router.delete(
    "/{booking_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Cancel booking",
)
async def delete_booking(
    booking_id: int,
    booking_service: BookingService = Depends(get_booking_service)
) -> Response:
    if not await booking_service.delete_booking(booking_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=BOOKING_NOT_FOUND
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)

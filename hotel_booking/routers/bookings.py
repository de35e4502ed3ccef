import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from hotel_booking import storage
from hotel_booking.db import get_db
from hotel_booking.schemas.booking import BookingCreate, BookingResponse, BookingWithDetails
from hotel_booking.utils.auth import get_current_user
from hotel_booking.utils.pricing import calculate_total_price

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/bookings",
    tags=["bookings"],
)


@router.get(
    "",
    response_model=List[BookingWithDetails],
    summary="List my bookings",
    description="Retrieve the caller's bookings with their room and hotel. Requires authentication."
)
def list_bookings(
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user),
):
    bookings = storage.get_bookings_by_user(db, current_user["id"])
    logger.debug(f"Retrieved {len(bookings)} bookings for user: {current_user['username']}")
    return bookings


@router.post(
    "",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Book a room",
    description="Book a room for a date range at its current nightly price. Requires authentication."
)
def create_booking(
    booking: BookingCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user),
):
    """
    Book a room for a date range.
    Requires authentication.

    - **roomId**: ID of the room to book.
    - **checkIn**: ISO date or datetime of arrival.
    - **checkOut**: ISO date or datetime of departure.

    The total price is the room's nightly price times the number of nights,
    partial days counting as a full night. Overlapping bookings are not rejected.
    """
    logger.debug(f"Creating booking for user: {current_user['username']}, room_id: {booking.room_id}")

    room = storage.get_room(db, booking.room_id)
    if not room:
        logger.error(f"Room not found: {booking.room_id}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid room")

    try:
        total_price = calculate_total_price(room.price, booking.check_in, booking.check_out)
    except ValueError as e:
        logger.error(f"Invalid stay: {booking.check_in} to {booking.check_out}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e

    db_booking = storage.create_booking(
        db,
        {
            "user_id": current_user["id"],
            "room_id": room.id,
            "check_in": booking.check_in,
            "check_out": booking.check_out,
            "total_price": total_price,
        },
    )
    logger.debug(f"Created booking: {db_booking.id}, total_price: {db_booking.total_price}")
    return db_booking


@router.post(
    "/{booking_id}/cancel",
    response_model=BookingResponse,
    summary="Cancel a booking",
    description="Cancel one of the caller's bookings. Requires authentication and ownership."
)
def cancel_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user),
):
    db_booking = storage.get_booking(db, booking_id)
    if not db_booking:
        logger.error(f"Booking not found: {booking_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")

    if db_booking.user_id != current_user["id"]:
        logger.error(f"User {current_user['username']} not authorized to cancel booking {booking_id}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")

    # Already-cancelled bookings pass through unchanged.
    db_booking = storage.cancel_booking(db, db_booking)
    logger.debug(f"Cancelled booking: {booking_id}")
    return db_booking

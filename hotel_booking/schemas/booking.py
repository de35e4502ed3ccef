from datetime import datetime
from typing import Optional
from pydantic import field_validator
from hotel_booking.models.booking import BookingStatus
from hotel_booking.schemas.base import CamelModel
from hotel_booking.schemas.hotel import HotelResponse
from hotel_booking.schemas.room import RoomResponse
from hotel_booking.utils.validation_helpers import to_naive_utc


class BookingCreate(CamelModel):
    room_id: int
    check_in: datetime
    check_out: datetime

    @field_validator("check_in", "check_out")
    @classmethod
    def check_utc(cls, value):
        return to_naive_utc(value)


class BookingResponse(CamelModel):
    id: int
    user_id: str
    room_id: int
    check_in: datetime
    check_out: datetime
    total_price: int
    status: BookingStatus
    created_at: Optional[datetime] = None


class BookingWithDetails(BookingResponse):
    room: RoomResponse
    hotel: HotelResponse

from datetime import datetime
from typing import List, Optional
from pydantic import Field
from hotel_booking.schemas.base import MAX_INT, CamelModel
from hotel_booking.schemas.room import RoomResponse


class HotelBase(CamelModel):
    name: str
    description: str
    address: str
    image_url: str
    rating: Optional[int] = Field(default=0, ge=0, le=5)
    min_price: int = Field(ge=0, le=MAX_INT)


class HotelCreate(HotelBase):
    pass


class HotelResponse(HotelBase):
    id: int
    rating: Optional[int] = 0
    min_price: int
    created_at: Optional[datetime] = None


class HotelWithRooms(HotelResponse):
    rooms: List[RoomResponse] = []

from typing import Optional
from pydantic import Field
from hotel_booking.schemas.base import MAX_INT, CamelModel


class RoomBase(CamelModel):
    name: str
    type: str
    capacity: int = Field(gt=0, le=MAX_INT)
    price: int = Field(gt=0, le=MAX_INT)
    available: Optional[bool] = True
    image_url: Optional[str] = None


class RoomCreate(RoomBase):
    pass


class RoomResponse(RoomBase):
    id: int
    hotel_id: int
    capacity: int
    price: int

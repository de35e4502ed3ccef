import enum
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import relationship
from hotel_booking.db import Base


class BookingStatus(str, enum.Enum):
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False)
    check_in = Column(DateTime, nullable=False)
    check_out = Column(DateTime, nullable=False)
    total_price = Column(Integer, nullable=False)
    status = Column(String, nullable=False, default=BookingStatus.CONFIRMED.value)
    created_at = Column(DateTime, server_default=func.now())

    room = relationship("Room", back_populates="bookings")
    user = relationship("User", back_populates="bookings")

    @property
    def hotel(self):
        return self.room.hotel if self.room is not None else None

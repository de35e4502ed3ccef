from sqlalchemy import Column, DateTime, Integer, String, Text, func
from sqlalchemy.orm import relationship
from hotel_booking.db import Base


class Hotel(Base):
    __tablename__ = "hotels"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    address = Column(String, nullable=False)
    image_url = Column(String, nullable=False)
    rating = Column(Integer, nullable=True, default=0)
    min_price = Column(Integer, nullable=False)  # whole currency units
    created_at = Column(DateTime, server_default=func.now())

    rooms = relationship("Room", back_populates="hotel", order_by="Room.id")

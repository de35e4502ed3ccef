import uuid
from sqlalchemy import Column, DateTime, String, func
from sqlalchemy.orm import relationship
from hotel_booking.db import Base


def _new_user_id():
    return str(uuid.uuid4())


class User(Base):
    __tablename__ = "users"

    # Opaque identity string; bookings only ever compare it for equality.
    id = Column(String, primary_key=True, default=_new_user_id)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    bookings = relationship("Booking", back_populates="user")

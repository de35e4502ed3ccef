"""
Storage functions over the relational store, one per entity operation.

Every function takes the request's SQLAlchemy session. Writes commit
immediately; no operation spans more than one statement.
"""
from typing import List, Optional
from sqlalchemy.orm import Session, contains_eager
from hotel_booking.models.booking import Booking, BookingStatus
from hotel_booking.models.hotel import Hotel
from hotel_booking.models.room import Room


# Hotels

def get_hotels(db: Session) -> List[Hotel]:
    return db.query(Hotel).order_by(Hotel.id).all()


def get_hotel(db: Session, hotel_id: int) -> Optional[Hotel]:
    return db.query(Hotel).filter(Hotel.id == hotel_id).first()


def create_hotel(db: Session, data: dict) -> Hotel:
    hotel = Hotel(**data)
    db.add(hotel)
    db.commit()
    db.refresh(hotel)
    return hotel


# Rooms

def get_rooms(db: Session, hotel_id: int) -> List[Room]:
    return db.query(Room).filter(Room.hotel_id == hotel_id).order_by(Room.id).all()


def get_room(db: Session, room_id: int) -> Optional[Room]:
    return db.query(Room).filter(Room.id == room_id).first()


def create_room(db: Session, data: dict) -> Room:
    room = Room(**data)
    db.add(room)
    db.commit()
    db.refresh(room)
    return room


# Bookings

def create_booking(db: Session, data: dict) -> Booking:
    booking = Booking(status=BookingStatus.CONFIRMED.value, **data)
    db.add(booking)
    db.commit()
    db.refresh(booking)
    return booking


def get_bookings_by_user(db: Session, user_id: str) -> List[Booking]:
    """Bookings of one user, each loaded together with its room and hotel."""
    return (
        db.query(Booking)
        .join(Booking.room)
        .join(Room.hotel)
        .options(contains_eager(Booking.room).contains_eager(Room.hotel))
        .filter(Booking.user_id == user_id)
        .order_by(Booking.id)
        .all()
    )


def get_booking(db: Session, booking_id: int) -> Optional[Booking]:
    return db.query(Booking).filter(Booking.id == booking_id).first()


def cancel_booking(db: Session, booking: Booking) -> Booking:
    booking.status = BookingStatus.CANCELLED.value
    db.commit()
    db.refresh(booking)
    return booking

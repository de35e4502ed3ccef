import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from hotel_booking import storage
from hotel_booking.db import get_db
from hotel_booking.schemas.hotel import HotelCreate, HotelResponse, HotelWithRooms
from hotel_booking.schemas.room import RoomCreate, RoomResponse
from hotel_booking.utils.auth import get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/hotels",
    tags=["hotels"],
)


@router.get("", response_model=List[HotelResponse], summary="List all hotels")
def list_hotels(db: Session = Depends(get_db)):
    """
    Retrieve every hotel in the catalog.
    Searching is left to the client.
    """
    hotels = storage.get_hotels(db)
    logger.debug(f"Retrieved {len(hotels)} hotels")
    return hotels


@router.get(
    "/{hotel_id}",
    response_model=HotelWithRooms,
    summary="Get a hotel with its rooms",
)
def get_hotel(hotel_id: int, db: Session = Depends(get_db)):
    hotel = storage.get_hotel(db, hotel_id)
    if not hotel:
        logger.error(f"Hotel not found: {hotel_id}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hotel not found")
    rooms = storage.get_rooms(db, hotel_id)
    return HotelWithRooms(
        **HotelResponse.model_validate(hotel).model_dump(),
        rooms=[RoomResponse.model_validate(room) for room in rooms],
    )


@router.post(
    "",
    response_model=HotelResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a hotel",
)
def create_hotel(
    hotel: HotelCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user),
):
    """
    Add a hotel to the catalog.
    Requires authentication; any logged-in user may manage inventory.
    """
    db_hotel = storage.create_hotel(db, hotel.model_dump())
    logger.debug(f"User {current_user['username']} created hotel: {db_hotel.id}")
    return db_hotel


@router.post(
    "/{hotel_id}/rooms",
    response_model=RoomResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a room to a hotel",
)
def create_room(
    hotel_id: int,
    room: RoomCreate,
    db: Session = Depends(get_db),
    current_user: dict = Depends(get_current_user),
):
    """
    Add a room to an existing hotel.
    Requires authentication. The hotel comes from the path, never the body.
    """
    if not storage.get_hotel(db, hotel_id):
        logger.error(f"Room creation for unknown hotel: {hotel_id}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid hotel")
    db_room = storage.create_room(db, {**room.model_dump(), "hotel_id": hotel_id})
    logger.debug(
        f"User {current_user['username']} created room {db_room.id} in hotel {hotel_id}"
    )
    return db_room

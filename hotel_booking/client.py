"""
Typed client for the hotel booking API.

Wraps an ``httpx.Client`` (``fastapi.testclient.TestClient`` works too).
Reads are cached per query key until a mutation that affects them runs;
error responses are raised as the exceptions in ``hotel_booking.errors``.
"""
import logging
from datetime import date, datetime, timezone
from typing import Dict, List, Optional, Tuple
import httpx
from pydantic import ValidationError as SchemaValidationError
from hotel_booking.errors import NotFound, Unauthorized, ValidationError, error_for_status
from hotel_booking.models.booking import BookingStatus
from hotel_booking.schemas.booking import BookingCreate, BookingResponse, BookingWithDetails
from hotel_booking.schemas.hotel import HotelCreate, HotelResponse, HotelWithRooms
from hotel_booking.schemas.room import RoomCreate, RoomResponse
from hotel_booking.schemas.user import Token, UserCreate, UserResponse

logger = logging.getLogger(__name__)

HOTELS_PATH = "/api/hotels"
HOTEL_PATH = "/api/hotels/{id}"
ROOMS_PATH = "/api/hotels/{id}/rooms"
BOOKINGS_PATH = "/api/bookings"
CANCEL_BOOKING_PATH = "/api/bookings/{id}/cancel"
REGISTER_PATH = "/api/register"
LOGIN_PATH = "/api/login"
CURRENT_USER_PATH = "/api/auth/user"


def _validated(schema, data):
    """Check outgoing data against a request schema before it is sent."""
    try:
        return schema.model_validate(data).model_dump(mode="json", by_alias=True)
    except SchemaValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise ValidationError(first["msg"], field) from e


def _isoformat(value):
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


class HotelBookingClient:
    def __init__(self, http: httpx.Client, token: Optional[str] = None):
        self.http = http
        self.token = token
        self._cache: Dict[Tuple, object] = {}

    # plumbing

    def _request(self, method, path, **kwargs) -> httpx.Response:
        headers = kwargs.pop("headers", {})
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        response = self.http.request(method, path, headers=headers, **kwargs)
        if response.is_success:
            return response
        try:
            body = response.json()
        except ValueError:
            body = {}
        message = body.get("message") if isinstance(body, dict) else None
        logger.debug(f"{method} {path} failed with {response.status_code}: {message}")
        raise error_for_status(
            response.status_code,
            message or response.reason_phrase,
            body.get("field") if isinstance(body, dict) else None,
        )

    def _query(self, key: Tuple, fetch):
        if key in self._cache:
            return self._cache[key]
        result = fetch()
        if result is not None:
            self._cache[key] = result
        return result

    def invalidate(self, *key):
        """Drop cached queries whose key starts with ``key``; no key drops everything."""
        for cached in list(self._cache):
            if cached[: len(key)] == key:
                del self._cache[cached]

    # auth

    def register(self, username, email, password) -> UserResponse:
        payload = _validated(UserCreate, {"username": username, "email": email, "password": password})
        response = self._request("POST", REGISTER_PATH, json=payload)
        return UserResponse.model_validate(response.json())

    def login(self, username, password) -> Token:
        response = self._request("POST", LOGIN_PATH, data={"username": username, "password": password})
        token = Token.model_validate(response.json())
        self.token = token.access_token
        self.invalidate()
        return token

    def logout(self):
        self.token = None
        self.invalidate()

    def current_user(self) -> Optional[UserResponse]:
        try:
            response = self._request("GET", CURRENT_USER_PATH)
        except Unauthorized:
            return None
        return UserResponse.model_validate(response.json())

    # hotels

    def list_hotels(self) -> List[HotelResponse]:
        def fetch():
            response = self._request("GET", HOTELS_PATH)
            return [HotelResponse.model_validate(item) for item in response.json()]

        return self._query((HOTELS_PATH,), fetch)

    def get_hotel(self, hotel_id: int) -> Optional[HotelWithRooms]:
        """The hotel with its rooms, or None when it does not exist."""
        def fetch():
            try:
                response = self._request("GET", HOTEL_PATH.format(id=hotel_id))
            except NotFound:
                return None
            return HotelWithRooms.model_validate(response.json())

        return self._query((HOTEL_PATH, hotel_id), fetch)

    def create_hotel(self, data) -> HotelResponse:
        payload = _validated(HotelCreate, data)
        response = self._request("POST", HOTELS_PATH, json=payload)
        self.invalidate(HOTELS_PATH)
        return HotelResponse.model_validate(response.json())

    def create_room(self, hotel_id: int, data) -> RoomResponse:
        payload = _validated(RoomCreate, data)
        response = self._request("POST", ROOMS_PATH.format(id=hotel_id), json=payload)
        self.invalidate(HOTEL_PATH, hotel_id)
        return RoomResponse.model_validate(response.json())

    # bookings

    def list_bookings(self) -> Optional[List[BookingWithDetails]]:
        """The caller's bookings, or None when not logged in."""
        def fetch():
            try:
                response = self._request("GET", BOOKINGS_PATH)
            except Unauthorized:
                return None
            return [BookingWithDetails.model_validate(item) for item in response.json()]

        return self._query((BOOKINGS_PATH,), fetch)

    def create_booking(self, room_id: int, check_in, check_out) -> BookingResponse:
        payload = {
            "roomId": room_id,
            "checkIn": _isoformat(check_in),
            "checkOut": _isoformat(check_out),
        }
        _validated(BookingCreate, payload)
        response = self._request("POST", BOOKINGS_PATH, json=payload)
        self.invalidate(BOOKINGS_PATH)
        return BookingResponse.model_validate(response.json())

    def cancel_booking(self, booking_id: int) -> BookingResponse:
        response = self._request("POST", CANCEL_BOOKING_PATH.format(id=booking_id))
        self.invalidate(BOOKINGS_PATH)
        return BookingResponse.model_validate(response.json())


def filter_hotels(hotels, search: str):
    """Hotels whose name or address contains ``search``, ignoring case."""
    needle = (search or "").lower()
    return [
        hotel for hotel in hotels
        if needle in hotel.name.lower() or needle in hotel.address.lower()
    ]


def group_bookings(bookings, now: Optional[datetime] = None):
    """
    Split bookings into upcoming, past and cancelled.

    Check-in times are naive UTC, so ``now`` defaults to the current UTC time
    without a zone.
    """
    if now is None:
        now = datetime.now(timezone.utc).replace(tzinfo=None)
    groups = {"upcoming": [], "past": [], "cancelled": []}
    for booking in bookings or []:
        if booking.status == BookingStatus.CANCELLED:
            groups["cancelled"].append(booking)
        elif booking.check_in >= now:
            groups["upcoming"].append(booking)
        else:
            groups["past"].append(booking)
    return groups

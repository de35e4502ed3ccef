from datetime import date, datetime
import pytest

from hotel_booking.client import HotelBookingClient, filter_hotels, group_bookings
from hotel_booking.errors import NotFound, Unauthorized, ValidationError, error_for_status, ServerError
from hotel_booking.models.hotel import Hotel
from hotel_booking.schemas.hotel import HotelResponse
from tests.conf_tests import (
    TEST_HOTEL_DATA,
    TEST_ROOM_DATA,
    client,
    clear_db,
    test_db,
    test_user,
    test_hotel,
    test_room,
)


@pytest.fixture
def api(test_user):  # pylint: disable=redefined-outer-name
    api_client = HotelBookingClient(client)
    api_client.login(test_user.username, "testpassword")
    return api_client


def test_anonymous_reads():
    anonymous = HotelBookingClient(client)
    assert anonymous.list_hotels() == []
    assert anonymous.get_hotel(9999) is None
    assert anonymous.list_bookings() is None
    assert anonymous.current_user() is None


def test_anonymous_create_raises_unauthorized():
    anonymous = HotelBookingClient(client)
    with pytest.raises(Unauthorized):
        anonymous.create_hotel(TEST_HOTEL_DATA)


# pylint: disable-next=redefined-outer-name
def test_hotel_list_cached_until_create(api, test_db):
    assert api.list_hotels() == []

    test_db.add(Hotel(name="Sneaky Inn", description="d", address="a", image_url="i", min_price=1))
    test_db.commit()
    assert api.list_hotels() == []

    created = api.create_hotel(TEST_HOTEL_DATA)
    names = [hotel.name for hotel in api.list_hotels()]
    assert names == ["Sneaky Inn", created.name]


# pylint: disable-next=redefined-outer-name
def test_create_room_refreshes_hotel_detail(api, test_hotel):
    assert api.get_hotel(test_hotel.id).rooms == []
    room = api.create_room(test_hotel.id, TEST_ROOM_DATA)
    detail = api.get_hotel(test_hotel.id)
    assert [r.id for r in detail.rooms] == [room.id]
    assert detail.rooms[0].hotel_id == test_hotel.id


# pylint: disable-next=redefined-outer-name
def test_booking_flow(api, test_room):
    assert api.list_bookings() == []

    booking = api.create_booking(test_room.id, date(2030, 6, 1), date(2030, 6, 4))
    assert booking.total_price == 150
    assert [b.id for b in api.list_bookings()] == [booking.id]

    cancelled = api.cancel_booking(booking.id)
    assert cancelled.status == "cancelled"
    assert api.list_bookings()[0].status == "cancelled"


# pylint: disable-next=redefined-outer-name
def test_server_errors_are_mapped(api, test_room):
    with pytest.raises(ValidationError) as excinfo:
        api.create_booking(test_room.id, "2030-06-04", "2030-06-01")
    assert excinfo.value.message == "Invalid dates"

    with pytest.raises(NotFound):
        api.cancel_booking(9999)


# pylint: disable-next=redefined-outer-name
def test_invalid_payload_rejected_before_sending(api):
    with pytest.raises(ValidationError) as excinfo:
        api.create_hotel({**TEST_HOTEL_DATA, "rating": 7})
    assert excinfo.value.field == "rating"
    assert api.list_hotels() == []


def test_register_then_login():
    api_client = HotelBookingClient(client)
    user = api_client.register("carol", "carol@example.com", "pw")
    api_client.login("carol", "pw")
    assert api_client.current_user().id == user.id

    api_client.logout()
    assert api_client.current_user() is None


def test_error_for_status():
    assert isinstance(error_for_status(400, "bad"), ValidationError)
    assert isinstance(error_for_status(401, "who"), Unauthorized)
    assert isinstance(error_for_status(404, "gone"), NotFound)
    assert isinstance(error_for_status(500, "boom"), ServerError)
    assert isinstance(error_for_status(418, "teapot"), ServerError)


def make_hotel(hotel_id, name, address):
    return HotelResponse(
        id=hotel_id, name=name, address=address, description="", image_url="", min_price=1
    )


def test_filter_hotels():
    hotels = [
        make_hotel(1, "Grand Plaza Hotel", "123 Main St, New York, NY"),
        make_hotel(2, "Seaside Resort", "45 Ocean Dr, Miami, FL"),
    ]
    assert filter_hotels(hotels, "") == hotels
    assert [h.id for h in filter_hotels(hotels, "plaza")] == [1]
    assert [h.id for h in filter_hotels(hotels, "MIAMI")] == [2]
    assert filter_hotels(hotels, "Denver") == []


# pylint: disable-next=redefined-outer-name
def test_group_bookings(api, test_room):
    past = api.create_booking(test_room.id, "2020-01-01", "2020-01-02")
    upcoming = api.create_booking(test_room.id, "2030-01-01", "2030-01-02")
    cancelled = api.create_booking(test_room.id, "2030-02-01", "2030-02-02")
    api.cancel_booking(cancelled.id)

    groups = group_bookings(api.list_bookings(), now=datetime(2025, 1, 1))
    assert [b.id for b in groups["upcoming"]] == [upcoming.id]
    assert [b.id for b in groups["past"]] == [past.id]
    assert [b.id for b in groups["cancelled"]] == [cancelled.id]
    assert group_bookings(None) == {"upcoming": [], "past": [], "cancelled": []}

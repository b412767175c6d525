from datetime import date, timedelta
from decimal import Decimal
import pytest
from fastapi import status
from ehotel.models import Booking, Room
from ehotel.schemas.room import RoomSearchCriteria
from ehotel.services.availability import find_available_rooms
from tests.conf_tests import (
    client,
    clear_db,
    persist,
    test_db,
    test_chain,
    test_manager,
    test_hotel,
    test_room,
    test_customer,
)


SEARCH_DATA = {
    "capacity": "double",
    "max_price": 150.00,
    "hotel_chain_id": 1,
    "min_stars": 3,
    "min_rooms_number": 20,
    "start_date": "2024-06-01",
    "end_date": "2024-06-05",
}


def criteria(chain_id, **overrides):
    return RoomSearchCriteria(**{**SEARCH_DATA, "hotel_chain_id": chain_id, **overrides})


def book(db, room, customer, start, end):
    return persist(
        db,
        Booking(sin_customer=customer.sin_customer, room_id=room.id, start_date=start, end_date=end),
    )


def found_ids(db, search):
    return {room.id for room in find_available_rooms(db, search)}


# pylint: disable-next=redefined-outer-name
def test_room_without_bookings_is_found(test_db, test_room, test_chain):
    assert found_ids(test_db, criteria(test_chain.id)) == {test_room.id}


# pylint: disable-next=redefined-outer-name
def test_overlapping_booking_excludes_room(test_db, test_room, test_chain, test_customer):
    book(test_db, test_room, test_customer, date(2024, 6, 3), date(2024, 6, 4))
    assert found_ids(test_db, criteria(test_chain.id)) == set()


@pytest.mark.parametrize(
    "start, end",
    [
        (date(2024, 5, 28), date(2024, 6, 1)),  # ends on the first requested day
        (date(2024, 6, 5), date(2024, 6, 9)),  # starts on the last requested day
        (date(2024, 5, 20), date(2024, 6, 20)),  # covers the whole stay
    ],
)
# pylint: disable-next=redefined-outer-name
def test_overlap_bounds_are_inclusive(test_db, test_room, test_chain, test_customer, start, end):
    book(test_db, test_room, test_customer, start, end)
    assert found_ids(test_db, criteria(test_chain.id)) == set()


@pytest.mark.parametrize(
    "start, end",
    [
        (date(2024, 5, 20), date(2024, 5, 31)),
        (date(2024, 6, 6), date(2024, 6, 10)),
    ],
)
# pylint: disable-next=redefined-outer-name
def test_adjacent_booking_does_not_exclude_room(test_db, test_room, test_chain, test_customer, start, end):
    book(test_db, test_room, test_customer, start, end)
    assert found_ids(test_db, criteria(test_chain.id)) == {test_room.id}


# pylint: disable-next=redefined-outer-name
def test_gap_between_two_bookings(test_db, test_room, test_chain, test_customer):
    first = book(test_db, test_room, test_customer, date(2024, 7, 1), date(2024, 7, 5))
    second = book(test_db, test_room, test_customer, date(2024, 7, 10), date(2024, 7, 12))

    in_gap = criteria(test_chain.id, start_date="2024-07-06", end_date="2024-07-09")
    assert found_ids(test_db, in_gap) == {test_room.id}

    for booking in (first, second):
        day = booking.start_date
        while day <= booking.end_date:
            inside = criteria(test_chain.id, start_date=day.isoformat(), end_date=day.isoformat())
            assert found_ids(test_db, inside) == set()
            day += timedelta(days=1)


@pytest.mark.parametrize(
    "overrides",
    [
        {"capacity": "simple"},
        {"max_price": 119.99},
        {"min_stars": 5},
        {"min_rooms_number": 31},
    ],
)
# pylint: disable-next=redefined-outer-name
def test_room_filtered_out_by_criteria(test_db, test_room, test_chain, overrides):
    assert found_ids(test_db, criteria(test_chain.id, **overrides)) == set()


# pylint: disable-next=redefined-outer-name
def test_boundary_criteria_still_match(test_db, test_room, test_chain):
    boundary = criteria(test_chain.id, max_price=120.00, min_stars=4, min_rooms_number=30)
    assert found_ids(test_db, boundary) == {test_room.id}


# pylint: disable-next=redefined-outer-name
def test_other_chain_does_not_match(test_db, test_room, test_chain):
    assert found_ids(test_db, criteria(test_chain.id + 1)) == set()


# pylint: disable-next=redefined-outer-name
def test_unavailable_room_is_not_found(test_db, test_room, test_chain):
    test_room.availability = False
    test_db.commit()
    assert found_ids(test_db, criteria(test_chain.id)) == set()


# pylint: disable-next=redefined-outer-name
def test_every_result_satisfies_criteria(test_db, test_hotel, test_chain, test_customer):
    rooms = [
        persist(test_db, Room(id=room_id, room_number=100 + room_id, availability=True,
                              price=Decimal(price), view="city", extensible=False,
                              capacity=capacity, hotel_id=test_hotel.id))
        for room_id, price, capacity in [
            (1, "80.00", "double"),
            (2, "150.00", "double"),
            (3, "150.01", "double"),
            (4, "90.00", "simple"),
            (5, "100.00", "double"),
        ]
    ]
    book(test_db, rooms[4], test_customer, date(2024, 6, 4), date(2024, 6, 8))

    search = criteria(test_chain.id)
    result = find_available_rooms(test_db, search)
    assert {room.id for room in result} == {1, 2}
    for room in result:
        assert room.price <= Decimal("150.00")
        assert room.capacity == "double"
        assert not any(
            booking.room_id == room.id
            and booking.start_date <= search.end_date
            and booking.end_date >= search.start_date
            for booking in test_db.query(Booking).all()
        )


# pylint: disable-next=redefined-outer-name
def test_search_api_end_to_end(test_db, test_room, test_chain, test_customer):
    search_data = {**SEARCH_DATA, "hotel_chain_id": test_chain.id}
    response = client.post("/rooms/search", json=search_data)
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert [room["id"] for room in data] == [test_room.id]
    assert Decimal(data[0]["price"]) == Decimal("120.00")

    book(test_db, test_room, test_customer, date(2024, 6, 3), date(2024, 6, 4))
    response = client.post("/rooms/search", json=search_data)
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []


def test_search_rejects_end_before_start():
    response = client.post(
        "/rooms/search", json={**SEARCH_DATA, "start_date": "2024-06-05", "end_date": "2024-06-01"}
    )
    assert response.status_code == 422


@pytest.mark.parametrize(
    "overrides",
    [
        {"min_stars": 0},
        {"min_stars": 6},
        {"max_price": -1},
        {"hotel_chain_id": 0},
        {"min_rooms_number": 0},
        {"capacity": "penthouse"},
    ],
)
def test_search_rejects_invalid_criteria(overrides):
    response = client.post("/rooms/search", json={**SEARCH_DATA, **overrides})
    assert response.status_code == 422


def test_search_with_no_rooms_returns_empty_list():
    response = client.post("/rooms/search", json=SEARCH_DATA)
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == []

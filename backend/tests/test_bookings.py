"""
Tests for the booking endpoints: eligibility, capacity, ownership and the
status code each outcome maps to.
"""

from datetime import datetime

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from app.models import Booking, TicketStatus
from tests import factories


def parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


async def booking_count(db_session) -> int:
    return (await db_session.execute(select(func.count(Booking.id)))).scalar_one()


async def fill_room(db_session, room, occupants: int = 3):
    for _ in range(occupants):
        other = await factories.create_user(db_session)
        await factories.create_booking(db_session, other.id, room.id)


# Eligibility


@pytest.mark.asyncio
@pytest.mark.parametrize("method,url", [("GET", "/booking"), ("POST", "/booking"), ("PUT", "/booking/1")])
async def test_without_enrollment_is_forbidden(client: AsyncClient, auth_headers, room, method, url):
    body = None if method == "GET" else {"roomId": room.id}
    response = await client.request(method, url, json=body, headers=auth_headers)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_without_ticket_is_forbidden(client: AsyncClient, auth_headers, enrollment, room):
    response = await client.post("/booking", json={"roomId": room.id}, headers=auth_headers)
    assert response.status_code == 403


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "status,is_remote,includes_hotel",
    [
        (TicketStatus.RESERVED, False, True),
        (TicketStatus.PAID, True, True),
        (TicketStatus.PAID, False, False),
    ],
    ids=["unpaid", "remote", "without_hotel"],
)
async def test_ineligible_ticket_is_forbidden(
    client: AsyncClient, db_session, auth_headers, enrollment, room, status, is_remote, includes_hotel
):
    ticket_type = await factories.create_ticket_type(
        db_session, is_remote=is_remote, includes_hotel=includes_hotel
    )
    await factories.create_ticket(db_session, enrollment.id, ticket_type.id, status)

    get_response = await client.get("/booking", headers=auth_headers)
    post_response = await client.post("/booking", json={"roomId": room.id}, headers=auth_headers)

    assert get_response.status_code == 403
    assert post_response.status_code == 403
    assert await booking_count(db_session) == 0


# GET /booking


@pytest.mark.asyncio
async def test_get_without_booking_is_not_found(client: AsyncClient, auth_headers, eligible_user, room):
    response = await client.get("/booking", headers=auth_headers)
    assert response.status_code == 404
    assert response.content == b""


@pytest.mark.asyncio
async def test_get_returns_booking_with_room(client: AsyncClient, db_session, auth_headers, eligible_user, room):
    booking = await factories.create_booking(db_session, eligible_user.id, room.id)

    response = await client.get("/booking", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == booking.id
    assert set(data["Room"]) == {"id", "name", "capacity", "hotelId", "createdAt", "updatedAt"}
    assert data["Room"]["id"] == room.id
    assert data["Room"]["name"] == room.name
    assert data["Room"]["capacity"] == room.capacity
    assert data["Room"]["hotelId"] == room.hotel_id
    assert parse_timestamp(data["Room"]["createdAt"]) == room.created_at
    assert parse_timestamp(data["Room"]["updatedAt"]) == room.updated_at


# POST /booking


@pytest.mark.asyncio
async def test_create_booking(client: AsyncClient, db_session, auth_headers, eligible_user, room):
    response = await client.post("/booking", json={"roomId": room.id}, headers=auth_headers)
    assert response.status_code == 200
    booking_id = response.json()["bookingId"]

    booking = await db_session.get(Booking, booking_id)
    assert booking.user_id == eligible_user.id
    assert booking.room_id == room.id


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body",
    [{"roomId": "string"}, {}, {"roomId": 1, "extra": True}, {"roomId": True}, {"roomId": "1"}],
)
async def test_create_with_bad_body_is_bad_request(
    client: AsyncClient, db_session, auth_headers, eligible_user, room, body
):
    """Booleans and numeric strings are rejected even when they would name an existing room."""
    assert room.id == 1
    response = await client.post("/booking", json=body, headers=auth_headers)
    assert response.status_code == 400
    assert response.content == b""
    assert await booking_count(db_session) == 0


@pytest.mark.asyncio
async def test_create_unknown_room_is_not_found(client: AsyncClient, auth_headers, eligible_user):
    response = await client.post("/booking", json={"roomId": 0}, headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_create_second_booking_is_forbidden(
    client: AsyncClient, db_session, auth_headers, eligible_user, room, other_room
):
    await factories.create_booking(db_session, eligible_user.id, room.id)

    response = await client.post("/booking", json={"roomId": other_room.id}, headers=auth_headers)
    assert response.status_code == 403
    assert await booking_count(db_session) == 1


@pytest.mark.asyncio
async def test_create_in_full_room_is_forbidden(client: AsyncClient, db_session, auth_headers, eligible_user, room):
    """Room with capacity 3 already holding 3 bookings."""
    await fill_room(db_session, room)

    response = await client.post("/booking", json={"roomId": room.id}, headers=auth_headers)
    assert response.status_code == 403
    assert await booking_count(db_session) == 3


# PUT /booking/{bookingId}


@pytest.mark.asyncio
async def test_update_booking(client: AsyncClient, db_session, auth_headers, eligible_user, room, other_room):
    booking = await factories.create_booking(db_session, eligible_user.id, room.id)

    response = await client.put(f"/booking/{booking.id}", json={"roomId": other_room.id}, headers=auth_headers)
    assert response.status_code == 200
    assert response.json() == {"bookingId": booking.id}

    get_response = await client.get("/booking", headers=auth_headers)
    assert get_response.json()["Room"]["id"] == other_room.id


@pytest.mark.asyncio
async def test_update_without_booking_is_not_found(client: AsyncClient, auth_headers, eligible_user, room):
    response = await client.put("/booking/1", json={"roomId": room.id}, headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_unknown_room_is_not_found(client: AsyncClient, db_session, auth_headers, eligible_user, room):
    booking = await factories.create_booking(db_session, eligible_user.id, room.id)

    response = await client.put(f"/booking/{booking.id}", json={"roomId": 0}, headers=auth_headers)
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_other_users_booking_is_unauthorized(
    client: AsyncClient, db_session, auth_headers, eligible_user, room, other_room
):
    await factories.create_booking(db_session, eligible_user.id, room.id)
    stranger = await factories.create_user(db_session)
    foreign = await factories.create_booking(db_session, stranger.id, room.id)

    response = await client.put(f"/booking/{foreign.id}", json={"roomId": other_room.id}, headers=auth_headers)
    assert response.status_code == 401

    await db_session.refresh(foreign)
    assert foreign.room_id == room.id


@pytest.mark.asyncio
async def test_update_to_same_room_is_forbidden(client: AsyncClient, db_session, auth_headers, eligible_user, room):
    booking = await factories.create_booking(db_session, eligible_user.id, room.id)

    response = await client.put(f"/booking/{booking.id}", json={"roomId": room.id}, headers=auth_headers)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_update_to_full_room_is_forbidden(
    client: AsyncClient, db_session, auth_headers, eligible_user, room, other_room
):
    booking = await factories.create_booking(db_session, eligible_user.id, other_room.id)
    await fill_room(db_session, room)

    response = await client.put(f"/booking/{booking.id}", json={"roomId": room.id}, headers=auth_headers)
    assert response.status_code == 403

    await db_session.refresh(booking)
    assert booking.room_id == other_room.id


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "url,body",
    [("/booking/1", {"roomId": "abc"}), ("/booking/1", {"roomId": True}), ("/booking/abc", {"roomId": 1})],
)
async def test_update_with_bad_input_is_bad_request(client: AsyncClient, auth_headers, eligible_user, url, body):
    response = await client.put(url, json=body, headers=auth_headers)
    assert response.status_code == 400

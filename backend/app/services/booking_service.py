"""
Hotel room booking for ticket holders.

Every operation runs the same eligibility gate first:

  1. The user must have an enrollment.
  2. The enrollment must have a ticket that is paid, for in-person
     attendance, and whose type includes hotel.

Any failing condition yields FORBIDDEN; callers cannot tell which one failed.

CONCURRENCY
===========

Capacity check and write happen in the same request transaction. The check
reads the target room with `for_update=True`, which on PostgreSQL takes a row
lock that is released when the request commits, so two requests for the same
room are evaluated one after the other and the occupancy count is never stale.

The one-booking-per-user rule is checked here and backed by a unique
constraint on bookings.user_id. If two creates from the same user race past
the check, the store reports the constraint violation and the loser gets
FORBIDDEN, same as the sequential case.
"""

from typing import Optional

from app.models import Booking, Room, TicketStatus
from app.services.interfaces import BookingStore, EligibilityStore, RoomStore
from app.services.results import BookingFailure, Result
from app.core.logging import get_logger

logger = get_logger(__name__)


class BookingService:
    def __init__(self, rooms: RoomStore, bookings: BookingStore, eligibility: EligibilityStore):
        self.rooms = rooms
        self.bookings = bookings
        self.eligibility = eligibility

    async def get_booking(self, user_id: int) -> Result[Booking]:
        """Return the caller's booking with its room."""
        denied = await self._check_eligibility(user_id)
        if denied:
            return Result.fail(denied)

        booking = await self.bookings.find_booking_by_user(user_id)
        if not booking:
            return Result.fail(BookingFailure.NOT_FOUND)

        return Result.success(booking)

    async def create_booking(self, user_id: int, room_id: int) -> Result[Booking]:
        """Reserve a room for a user who holds no booking yet."""
        denied = await self._check_eligibility(user_id)
        if denied:
            return Result.fail(denied)

        room_check = await self._check_room(room_id)
        if not room_check.ok:
            return Result.fail(room_check.failure)

        if await self.bookings.find_booking_by_user(user_id):
            logger.info("booking_denied", user_id=user_id, room_id=room_id, reason="already_booked")
            return Result.fail(BookingFailure.FORBIDDEN)

        booking = await self.bookings.create_booking(user_id, room_id)
        if booking is None:
            logger.warning("booking_denied", user_id=user_id, room_id=room_id, reason="duplicate_on_write")
            return Result.fail(BookingFailure.FORBIDDEN)

        logger.info("booking_created", booking_id=booking.id, user_id=user_id, room_id=room_id)
        return Result.success(booking)

    async def update_booking(self, user_id: int, room_id: int, booking_id: int) -> Result[Booking]:
        """Move the caller's booking `booking_id` to another room."""
        denied = await self._check_eligibility(user_id)
        if denied:
            return Result.fail(denied)

        booking = await self.bookings.find_booking_by_user(user_id)
        if not booking:
            return Result.fail(BookingFailure.NOT_FOUND)

        if booking.id != booking_id:
            logger.warning(
                "booking_denied",
                user_id=user_id,
                booking_id=booking_id,
                reason="not_owner",
            )
            return Result.fail(BookingFailure.UNAUTHORIZED)

        if booking.room_id == room_id:
            logger.info("booking_denied", booking_id=booking.id, room_id=room_id, reason="same_room")
            return Result.fail(BookingFailure.FORBIDDEN)

        room_check = await self._check_room(room_id)
        if not room_check.ok:
            return Result.fail(room_check.failure)

        previous_room_id = booking.room_id
        updated = await self.bookings.update_booking_room(booking.id, room_id)

        logger.info(
            "booking_updated",
            booking_id=updated.id,
            user_id=user_id,
            from_room_id=previous_room_id,
            to_room_id=room_id,
        )
        return Result.success(updated)

    async def _check_room(self, room_id: int) -> Result[Room]:
        room = await self.rooms.find_room_by_id(room_id, for_update=True)
        if not room:
            return Result.fail(BookingFailure.NOT_FOUND)

        occupied = await self.rooms.count_bookings_for_room(room_id)
        if occupied >= room.capacity:
            logger.info(
                "booking_denied",
                room_id=room_id,
                reason="room_full",
                occupied=occupied,
                capacity=room.capacity,
            )
            return Result.fail(BookingFailure.ROOM_FULL)

        return Result.success(room)

    async def _check_eligibility(self, user_id: int) -> Optional[BookingFailure]:
        """Return the failure kind that disqualifies the user, or None."""
        enrollment = await self.eligibility.find_enrollment_by_user(user_id)
        if not enrollment:
            logger.info("booking_denied", user_id=user_id, reason="no_enrollment")
            return BookingFailure.FORBIDDEN

        ticket = await self.eligibility.find_ticket_by_enrollment(enrollment.id)
        if (
            not ticket
            or ticket.status == TicketStatus.RESERVED
            or ticket.ticket_type.is_remote
            or not ticket.ticket_type.includes_hotel
        ):
            logger.info("booking_denied", user_id=user_id, reason="ticket_not_eligible")
            return BookingFailure.FORBIDDEN

        return None

"""
Data-access ports consumed by the booking service.

The service depends only on these ABCs. SQLAlchemy adapters live in
app.repositories; tests provide in-memory implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.models import Booking, Enrollment, Room, Ticket


class RoomStore(ABC):
    """Read access to rooms and their occupancy."""

    @abstractmethod
    async def find_room_by_id(self, room_id: int, for_update: bool = False) -> Optional[Room]:
        """
        Look up a room.

        Args:
            room_id: Room to fetch
            for_update: Hold a row lock on the room until the surrounding
                transaction ends. Implementations without locks ignore it.
        """

    @abstractmethod
    async def count_bookings_for_room(self, room_id: int) -> int:
        """Number of bookings currently referencing the room."""


class BookingStore(ABC):
    """Read/write access to bookings."""

    @abstractmethod
    async def find_booking_by_user(self, user_id: int) -> Optional[Booking]:
        """The user's booking with its room loaded, or None."""

    @abstractmethod
    async def create_booking(self, user_id: int, room_id: int) -> Optional[Booking]:
        """
        Insert a booking.

        Returns None when the user already owns a booking at write time
        (the check in the service lost a race).
        """

    @abstractmethod
    async def update_booking_room(self, booking_id: int, room_id: int) -> Booking:
        """Point an existing booking at another room."""


class EligibilityStore(ABC):
    """Read-only view of the enrollment and ticket data that gates booking."""

    @abstractmethod
    async def find_enrollment_by_user(self, user_id: int) -> Optional[Enrollment]:
        """The user's enrollment with its address loaded, or None."""

    @abstractmethod
    async def find_ticket_by_enrollment(self, enrollment_id: int) -> Optional[Ticket]:
        """The enrollment's ticket with its ticket type loaded."""

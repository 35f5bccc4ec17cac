"""
Booking persistence.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models import Booking
from app.services.interfaces import BookingStore
from app.core.logging import get_logger

logger = get_logger(__name__)


class BookingRepository(BookingStore):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_booking_by_user(self, user_id: int) -> Optional[Booking]:
        result = await self.db.execute(
            select(Booking)
            .where(Booking.user_id == user_id)
            .options(selectinload(Booking.room))
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def create_booking(self, user_id: int, room_id: int) -> Optional[Booking]:
        booking = Booking(user_id=user_id, room_id=room_id)
        self.db.add(booking)
        try:
            await self.db.flush()
        except IntegrityError:
            # uq_booking_user: a concurrent request already booked for this user
            await self.db.rollback()
            logger.warning("booking_insert_conflict", user_id=user_id, room_id=room_id)
            return None

        await self.db.refresh(booking)
        return booking

    async def update_booking_room(self, booking_id: int, room_id: int) -> Booking:
        booking = await self.db.get(Booking, booking_id)
        booking.room_id = room_id
        await self.db.flush()
        await self.db.refresh(booking)
        return booking

"""
Room lookups and occupancy counts.
"""

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Booking, Room
from app.services.interfaces import RoomStore


class RoomRepository(RoomStore):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_room_by_id(self, room_id: int, for_update: bool = False) -> Optional[Room]:
        query = select(Room).where(Room.id == room_id)
        if for_update:
            # Rendered as SELECT ... FOR UPDATE on PostgreSQL, dropped on SQLite
            query = query.with_for_update()
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def count_bookings_for_room(self, room_id: int) -> int:
        result = await self.db.execute(
            select(func.count(Booking.id)).where(Booking.room_id == room_id)
        )
        return result.scalar_one()

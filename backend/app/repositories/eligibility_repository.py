"""
Read-only enrollment and ticket lookups used for the booking eligibility gate.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models import Enrollment, Ticket
from app.services.interfaces import EligibilityStore


class EligibilityRepository(EligibilityStore):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_enrollment_by_user(self, user_id: int) -> Optional[Enrollment]:
        result = await self.db.execute(
            select(Enrollment)
            .where(Enrollment.user_id == user_id)
            .options(selectinload(Enrollment.address))
        )
        return result.scalar_one_or_none()

    async def find_ticket_by_enrollment(self, enrollment_id: int) -> Optional[Ticket]:
        # An enrollment holds one ticket; take the latest if the upstream flow left more
        result = await self.db.execute(
            select(Ticket)
            .where(Ticket.enrollment_id == enrollment_id)
            .options(selectinload(Ticket.ticket_type))
            .order_by(Ticket.id.desc())
            .limit(1)
        )
        return result.scalar_one_or_none()

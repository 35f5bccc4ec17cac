"""
SQLAlchemy implementations of the booking service's data-access ports.
"""

from .room_repository import RoomRepository
from .booking_repository import BookingRepository
from .eligibility_repository import EligibilityRepository

__all__ = ['RoomRepository', 'BookingRepository', 'EligibilityRepository']

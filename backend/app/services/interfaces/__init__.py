"""
Service interfaces for dependency inversion.
Allows swapping storage implementations without changing business logic.
"""

from .stores import RoomStore, BookingStore, EligibilityStore

__all__ = ['RoomStore', 'BookingStore', 'EligibilityStore']

from app.models.user import User, Session
from app.models.enrollment import Enrollment, Address
from app.models.ticket import TicketType, Ticket, TicketStatus
from app.models.hotel import Hotel, Room
from app.models.booking import Booking

__all__ = [
    "User", "Session",
    "Enrollment", "Address",
    "TicketType", "Ticket", "TicketStatus",
    "Hotel", "Room",
    "Booking",
]

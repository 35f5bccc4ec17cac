from app.schemas.user import UserCreate, UserResponse, UserLogin, SessionUser, SignInResponse
from app.schemas.booking import BookingBody, BookingIdResponse, RoomResponse, BookingWithRoomResponse

__all__ = [
    "UserCreate", "UserResponse", "UserLogin", "SessionUser", "SignInResponse",
    "BookingBody", "BookingIdResponse", "RoomResponse", "BookingWithRoomResponse",
]

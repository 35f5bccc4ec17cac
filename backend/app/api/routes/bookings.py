"""
Booking endpoints. Each handler authenticates the caller, runs one booking
service operation and maps its outcome to a status code. Failures carry no body.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.schemas.booking import BookingBody, BookingIdResponse, BookingWithRoomResponse
from app.services.booking_service import BookingService
from app.services.results import BookingFailure, Result
from app.repositories import BookingRepository, EligibilityRepository, RoomRepository
from app.core.security import get_current_user_id
from app.core.metrics import booking_latency, record_booking_outcome
from app.core.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/booking", tags=["Bookings"])

FAILURE_STATUS = {
    BookingFailure.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    BookingFailure.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    BookingFailure.ROOM_FULL: status.HTTP_403_FORBIDDEN,
    BookingFailure.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
}


def get_booking_service(db: AsyncSession = Depends(get_db)) -> BookingService:
    return BookingService(
        rooms=RoomRepository(db),
        bookings=BookingRepository(db),
        eligibility=EligibilityRepository(db),
    )


def failure_response(operation: str, result: Result) -> Response:
    """Bodyless response for a failed result; unknown kinds become 400."""
    record_booking_outcome(operation, result.failure.value)
    return Response(status_code=FAILURE_STATUS.get(result.failure, status.HTTP_400_BAD_REQUEST))


@router.get("", response_model=BookingWithRoomResponse)
async def get_booking(
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Get the caller's booking together with its room."""
    with booking_latency.labels(operation="get").time():
        result = await service.get_booking(user_id)

    if not result.ok:
        return failure_response("get", result)

    record_booking_outcome("get", "ok")
    return BookingWithRoomResponse.model_validate(result.value)


@router.post("", response_model=BookingIdResponse)
async def create_booking(
    body: BookingBody,
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Reserve a room. One booking per user; the room must have free capacity."""
    with booking_latency.labels(operation="create").time():
        result = await service.create_booking(user_id, body.room_id)

    if not result.ok:
        return failure_response("create", result)

    record_booking_outcome("create", "ok")
    return BookingIdResponse(booking_id=result.value.id)


@router.put("/{booking_id}", response_model=BookingIdResponse)
async def update_booking(
    booking_id: int,
    body: BookingBody,
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """Move the caller's booking to another room."""
    with booking_latency.labels(operation="update").time():
        result = await service.update_booking(user_id, body.room_id, booking_id)

    if not result.ok:
        return failure_response("update", result)

    record_booking_outcome("update", "ok")
    return BookingIdResponse(booking_id=result.value.id)

"""
Pydantic schemas for booking-related request/response validation.

Wire names are camelCase (`roomId`, `bookingId`, `hotelId`, ...).
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field


class BookingBody(BaseModel):
    # strict: JSON true/false and numeric strings are not room ids
    room_id: int = Field(alias="roomId", strict=True)

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class BookingIdResponse(BaseModel):
    booking_id: int = Field(alias="bookingId")

    model_config = ConfigDict(populate_by_name=True)


class RoomResponse(BaseModel):
    id: int
    name: str
    capacity: int
    hotel_id: int = Field(alias="hotelId")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class BookingWithRoomResponse(BaseModel):
    id: int
    room: RoomResponse = Field(alias="Room")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

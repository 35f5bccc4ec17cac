"""
Outcome values returned by the booking service.

Every operation returns a Result: either `ok` with a value, or a failure kind
from the closed BookingFailure set. Callers branch on `result.ok` and map the
failure kind; nothing is raised for expected business outcomes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class BookingFailure(str, Enum):
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    ROOM_FULL = "room_full"  # surfaced as FORBIDDEN at the HTTP boundary
    UNAUTHORIZED = "unauthorized"
    BAD_REQUEST = "bad_request"


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    failure: Optional[BookingFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, failure: BookingFailure) -> "Result[T]":
        return cls(failure=failure)

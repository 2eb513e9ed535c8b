"""Domain error codes for the cinema module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_DIMENSION = "INVALID_DIMENSION"
    INVALID_COORDINATE = "INVALID_COORDINATE"
    SEAT_ALREADY_SOLD = "SEAT_ALREADY_SOLD"
    THEATRE_NOT_OPEN = "THEATRE_NOT_OPEN"
    THEATRE_ALREADY_OPEN = "THEATRE_ALREADY_OPEN"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidDimensionError(DomainError):
    """Raised when a theatre dimension is outside 1..bound."""

    def __init__(self, dimension: str, bound: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_DIMENSION,
            message=f"Number must be in range 1 to {bound}",
        )
        self.dimension = dimension
        self.bound = bound


class InvalidCoordinateError(DomainError):
    """Raised when a row or seat number is outside the theatre."""

    def __init__(self, coordinate: str, bound: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_COORDINATE,
            message=f"The {coordinate} number must be in range 1 to {bound}",
        )
        self.coordinate = coordinate
        self.bound = bound


class SeatAlreadySoldError(DomainError):
    """Raised when a seat has already been purchased."""

    def __init__(self, row: int, seat: int) -> None:
        super().__init__(
            code=ErrorCode.SEAT_ALREADY_SOLD,
            message="Chosen seat is unavailable for purchase",
        )
        self.row = row
        self.seat = seat


class TheatreNotOpenError(DomainError):
    """Raised when the theatre is used before it has been opened."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.THEATRE_NOT_OPEN,
            message="The theatre has not been opened",
        )


class TheatreAlreadyOpenError(DomainError):
    """Raised when the theatre dimensions are set a second time."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.THEATRE_ALREADY_OPEN,
            message="The theatre is already open",
        )

from cinema.domain.errors import (
    DomainError,
    ErrorCode,
    InvalidCoordinateError,
    InvalidDimensionError,
    SeatAlreadySoldError,
    TheatreAlreadyOpenError,
    TheatreNotOpenError,
)
from cinema.domain.models import Theatre
from cinema.domain.result import Err, Ok, Result
from cinema.domain.value_objects import MAX_DIMENSION, SeatStatus, Statistics, TheatreSize

__all__ = [
    "Theatre",
    "TheatreSize",
    "SeatStatus",
    "Statistics",
    "MAX_DIMENSION",
    "Ok",
    "Err",
    "Result",
    "DomainError",
    "ErrorCode",
    "InvalidDimensionError",
    "InvalidCoordinateError",
    "SeatAlreadySoldError",
    "TheatreNotOpenError",
    "TheatreAlreadyOpenError",
]

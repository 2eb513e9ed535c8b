"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum

from cinema.domain.errors import InvalidDimensionError

MAX_DIMENSION = 9


class SeatStatus(Enum):
    """Availability of a single seat, valued by its seat-map symbol."""

    AVAILABLE = "S"
    SOLD = "B"

    @property
    def symbol(self) -> str:
        return self.value


@dataclass(frozen=True)
class TheatreSize:
    """Rows and seats per row, each in 1..MAX_DIMENSION."""

    rows: int
    seats_per_row: int

    def __post_init__(self) -> None:
        if not 1 <= self.rows <= MAX_DIMENSION:
            raise InvalidDimensionError("rows", MAX_DIMENSION)
        if not 1 <= self.seats_per_row <= MAX_DIMENSION:
            raise InvalidDimensionError("seats_per_row", MAX_DIMENSION)

    @property
    def capacity(self) -> int:
        return self.rows * self.seats_per_row


@dataclass(frozen=True)
class Statistics:
    """Snapshot of ticket sales."""

    sold_count: int
    sold_percentage: float
    current_income: int
    possible_income: int

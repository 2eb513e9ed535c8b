"""Domain model for the theatre seat map.

Theatre is the only aggregate: it owns the dimensions, the seat grid and the
income accumulators. It is not thread-safe; callers serialise access
(see TheatreService).
"""

from typing import Self

from cinema.domain import pricing
from cinema.domain.errors import InvalidCoordinateError, SeatAlreadySoldError
from cinema.domain.value_objects import SeatStatus, Statistics, TheatreSize


class Theatre:
    """A single screen with a rows x seats_per_row grid of seats."""

    def __init__(self, size: TheatreSize) -> None:
        self._size = size
        self._seats = [
            [SeatStatus.AVAILABLE] * size.seats_per_row for _ in range(size.rows)
        ]
        self._current_income = 0
        self._possible_income = pricing.possible_income(size.rows, size.seats_per_row)

    @classmethod
    def open(cls, rows: int, seats_per_row: int) -> Self:
        """Create a theatre with every seat available.

        Raises:
            InvalidDimensionError: If rows or seats_per_row is outside 1..9.
        """
        return cls(TheatreSize(rows=rows, seats_per_row=seats_per_row))

    @property
    def size(self) -> TheatreSize:
        return self._size

    @property
    def rows(self) -> int:
        return self._size.rows

    @property
    def seats_per_row(self) -> int:
        return self._size.seats_per_row

    @property
    def current_income(self) -> int:
        return self._current_income

    @property
    def possible_income(self) -> int:
        return self._possible_income

    def seat_status(self, row: int, seat: int) -> SeatStatus:
        self._check_coordinates(row, seat)
        return self._seats[row - 1][seat - 1]

    def ticket_price(self, row: int) -> int:
        """Return the price of any seat in the given row."""
        if not 1 <= row <= self.rows:
            raise InvalidCoordinateError("row", self.rows)
        return pricing.ticket_price(self.rows, self.seats_per_row, row)

    def render_grid(self) -> list[list[str]]:
        """Return the seat map as rows of cells.

        The first row is the header: a blank corner followed by the seat
        numbers. Every following row starts with its row number followed by
        one symbol per seat.
        """
        header = [" "] + [str(seat) for seat in range(1, self.seats_per_row + 1)]
        body = [
            [str(row)] + [status.symbol for status in statuses]
            for row, statuses in enumerate(self._seats, start=1)
        ]
        return [header, *body]

    def sell(self, row: int, seat: int) -> int:
        """Mark a seat as sold and return its price.

        Raises:
            InvalidCoordinateError: If row or seat is outside the theatre.
            SeatAlreadySoldError: If the seat has already been sold.
        """
        self._check_coordinates(row, seat)
        if self._seats[row - 1][seat - 1] is SeatStatus.SOLD:
            raise SeatAlreadySoldError(row, seat)

        price = pricing.ticket_price(self.rows, self.seats_per_row, row)
        self._seats[row - 1][seat - 1] = SeatStatus.SOLD
        self._current_income += price
        return price

    def sold_count(self) -> int:
        return sum(statuses.count(SeatStatus.SOLD) for statuses in self._seats)

    def statistics(self) -> Statistics:
        sold = self.sold_count()
        return Statistics(
            sold_count=sold,
            sold_percentage=100 * sold / self._size.capacity,
            current_income=self._current_income,
            possible_income=self._possible_income,
        )

    def _check_coordinates(self, row: int, seat: int) -> None:
        if not 1 <= row <= self.rows:
            raise InvalidCoordinateError("row", self.rows)
        if not 1 <= seat <= self.seats_per_row:
            raise InvalidCoordinateError("seat", self.seats_per_row)

    def __repr__(self) -> str:
        return f"Theatre(rows={self.rows}, seats_per_row={self.seats_per_row})"

"""Theatre service - all business orchestration lives here.

Services:
- Depend only on interfaces (stores)
- Serialise access to the theatre
- Map domain errors into Err results
- Return Ok(domain value) or Err(domain error)
"""

import logging
import threading

from cinema.domain import (
    DomainError,
    Err,
    Ok,
    Result,
    Statistics,
    Theatre,
    TheatreAlreadyOpenError,
    TheatreNotOpenError,
)
from cinema.stores.interfaces import TheatreStore

logger = logging.getLogger(__name__)


class TheatreService:
    """Service for seat map, ticket sales and statistics."""

    def __init__(self, store: TheatreStore) -> None:
        self._store = store
        self._lock = threading.Lock()

    def open_theatre(self, rows: int, seats_per_row: int) -> Result[Theatre]:
        """Open the theatre with the given dimensions.

        Errors:
            InvalidDimensionError: If a dimension is outside 1..9.
            TheatreAlreadyOpenError: If a theatre is already open.
        """
        with self._lock:
            if self._store.get_theatre() is not None:
                return self._reject("open_theatre", TheatreAlreadyOpenError())
            try:
                theatre = Theatre.open(rows, seats_per_row)
            except DomainError as exc:
                return self._reject("open_theatre", exc)
            self._store.save_theatre(theatre)

        logger.info(
            "Opened theatre rows=%s seats_per_row=%s possible_income=%s",
            theatre.rows,
            theatre.seats_per_row,
            theatre.possible_income,
        )
        return Ok(theatre)

    def show_seats(self) -> Result[list[list[str]]]:
        """Return the rendered seat map.

        Errors:
            TheatreNotOpenError: If no theatre has been opened.
        """
        theatre = self._store.get_theatre()
        if theatre is None:
            return self._reject("show_seats", TheatreNotOpenError())
        return Ok(theatre.render_grid())

    def buy_ticket(self, row: int, seat: int) -> Result[int]:
        """Sell the seat at (row, seat) and return its price.

        Errors:
            TheatreNotOpenError: If no theatre has been opened.
            InvalidCoordinateError: If row or seat is outside the theatre.
            SeatAlreadySoldError: If the seat is already sold.
        """
        with self._lock:
            theatre = self._store.get_theatre()
            if theatre is None:
                return self._reject("buy_ticket", TheatreNotOpenError())
            try:
                price = theatre.sell(row, seat)
            except DomainError as exc:
                return self._reject("buy_ticket", exc)

        logger.info("Sold row=%s seat=%s price=%s", row, seat, price)
        return Ok(price)

    def statistics(self) -> Result[Statistics]:
        """Return the current sales statistics.

        Errors:
            TheatreNotOpenError: If no theatre has been opened.
        """
        theatre = self._store.get_theatre()
        if theatre is None:
            return self._reject("statistics", TheatreNotOpenError())
        return Ok(theatre.statistics())

    @staticmethod
    def _reject(operation: str, error: DomainError) -> Err:
        logger.warning("%s rejected: %s", operation, error)
        return Err(error)

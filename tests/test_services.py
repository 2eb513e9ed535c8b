"""Unit tests for TheatreService.

These test result mapping, lifecycle and locking.
Run with: pytest tests/test_services.py -v
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from cinema.domain import Err, ErrorCode, Ok, Statistics, Theatre
from cinema.services import TheatreService
from cinema.stores import InMemoryTheatreStore


class TestOpenTheatre:
    """Tests for TheatreService.open_theatre."""

    def test_open_saves_theatre(self, service: TheatreService, store: InMemoryTheatreStore):
        """A valid size opens the theatre and stores it."""
        result = service.open_theatre(4, 4)

        assert isinstance(result, Ok)
        assert store.get_theatre() is result.value

    def test_invalid_dimension_returns_err(self, service: TheatreService, store):
        """An out-of-range size returns Err and opens nothing."""
        result = service.open_theatre(10, 4)

        assert isinstance(result, Err)
        assert result.code is ErrorCode.INVALID_DIMENSION
        assert result.error.dimension == "rows"
        assert store.get_theatre() is None

    def test_second_open_is_rejected(self, service: TheatreService, store):
        """The active theatre cannot be replaced."""
        first = service.open_theatre(4, 4)

        result = service.open_theatre(5, 5)

        assert isinstance(result, Err)
        assert result.code is ErrorCode.THEATRE_ALREADY_OPEN
        assert store.get_theatre() is first.value


class TestBeforeOpen:
    """Operations before the theatre is opened."""

    def test_show_seats_not_open(self, service: TheatreService):
        """show_seats returns THEATRE_NOT_OPEN."""
        assert service.show_seats().code is ErrorCode.THEATRE_NOT_OPEN

    def test_buy_ticket_not_open(self, service: TheatreService):
        """buy_ticket returns THEATRE_NOT_OPEN."""
        assert service.buy_ticket(1, 1).code is ErrorCode.THEATRE_NOT_OPEN

    def test_statistics_not_open(self, service: TheatreService):
        """statistics returns THEATRE_NOT_OPEN."""
        assert service.statistics().code is ErrorCode.THEATRE_NOT_OPEN


class TestBuyTicket:
    """Tests for TheatreService.buy_ticket."""

    def test_end_to_end_small_theatre(self, service: TheatreService):
        """open(4,4), buy(1,1) -> 10, then statistics report the sale."""
        service.open_theatre(4, 4)

        assert service.buy_ticket(1, 1) == Ok(10)
        assert service.statistics() == Ok(
            Statistics(sold_count=1, sold_percentage=6.25, current_income=10, possible_income=160)
        )

    def test_already_sold_returns_err(self, service: TheatreService):
        """Buying the same seat twice returns SEAT_ALREADY_SOLD."""
        service.open_theatre(4, 4)
        service.buy_ticket(2, 2)

        result = service.buy_ticket(2, 2)

        assert isinstance(result, Err)
        assert result.code is ErrorCode.SEAT_ALREADY_SOLD
        assert service.statistics().value.current_income == 10

    def test_invalid_coordinate_returns_err(self, service: TheatreService):
        """Buying outside the theatre returns INVALID_COORDINATE."""
        service.open_theatre(4, 4)

        result = service.buy_ticket(1, 9)

        assert result.code is ErrorCode.INVALID_COORDINATE
        assert result.error.coordinate == "seat"

    def test_concurrent_buyers_sell_seat_once(self):
        """Many threads buying the same seat produce exactly one sale."""
        service = TheatreService(InMemoryTheatreStore())
        service.open_theatre(9, 9)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda _: service.buy_ticket(5, 5), range(50)))

        assert sum(isinstance(result, Ok) for result in results) == 1
        assert service.statistics().value.current_income == 8

    def test_rejections_are_logged(self, service: TheatreService, caplog):
        """Rejected purchases are logged as warnings."""
        service.open_theatre(4, 4)

        with caplog.at_level(logging.WARNING, logger="cinema"):
            service.buy_ticket(0, 1)

        assert "buy_ticket rejected" in caplog.text


class TestShowSeats:
    """Tests for TheatreService.show_seats."""

    def test_returns_rendered_grid(self, service: TheatreService):
        """show_seats returns the theatre's rendered grid."""
        opened = service.open_theatre(2, 2)
        service.buy_ticket(2, 1)

        result = service.show_seats()

        assert isinstance(opened.value, Theatre)
        assert result == Ok([[" ", "1", "2"], ["1", "S", "S"], ["2", "B", "S"]])

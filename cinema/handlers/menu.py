"""Text menu handler - handles console concerns only.

Handlers:
- Prompt for and parse input, validating its format
- Call services for business logic
- Map domain errors to user-facing messages
- Never contain business logic
"""

from typing import TextIO

from cinema.domain import Err, ErrorCode, Statistics
from cinema.handlers.serializers import (
    MenuChoice,
    MenuChoiceSerializer,
    SeatSelectionSerializer,
    StatisticsSerializer,
    TheatreSizeSerializer,
)
from cinema.services import TheatreService

MENU = "\n".join(
    [
        "",
        "1. Show the seats",
        "2. Buy a ticket",
        "3. Statistics",
        "0. Exit",
    ]
)
WRONG_INPUT = "Wrong input!"
ALREADY_PURCHASED = "That ticket has already been purchased!"


class MenuHandler:
    """Runs the cinema menu loop against a TheatreService."""

    def __init__(self, service: TheatreService, stdin: TextIO, stdout: TextIO) -> None:
        self._service = service
        self._stdin = stdin
        self._stdout = stdout

    def run(self) -> None:
        """Open the theatre, then serve menu choices until exit or end of input."""
        try:
            self.open_theatre()
            while True:
                self._say(MENU)
                choice = self._read_choice()
                if choice is None:
                    self._say(WRONG_INPUT)
                    continue
                if choice is MenuChoice.EXIT:
                    break
                self.dispatch(choice)
        except EOFError:
            pass

    def dispatch(self, choice: MenuChoice) -> None:
        if choice is MenuChoice.SHOW_SEATS:
            self.show_seats()
        elif choice is MenuChoice.BUY_TICKET:
            self.buy_ticket()
        elif choice is MenuChoice.STATISTICS:
            self.show_statistics()

    def open_theatre(self) -> None:
        """Prompt for the dimensions until the theatre opens."""
        while True:
            serializer = TheatreSizeSerializer(
                data={
                    "rows": self._prompt("Enter the number of rows:"),
                    "seats_per_row": self._prompt("Enter the number of seats in each row:"),
                }
            )
            if not serializer.is_valid():
                self._say(f"\n{WRONG_INPUT}")
                continue

            result = self._service.open_theatre(**serializer.validated_data)
            if isinstance(result, Err):
                self._say(f"\n{WRONG_INPUT} {result.error.message}")
                if result.code is ErrorCode.THEATRE_ALREADY_OPEN:
                    return
                continue
            return

    def show_seats(self) -> None:
        result = self._service.show_seats()
        if isinstance(result, Err):
            self._say(f"\n{result.error.message}")
            return

        self._say("\nCinema:")
        for cells in result.value:
            self._say(" ".join(cells))

    def buy_ticket(self) -> None:
        """Prompt for a seat until one is sold."""
        while True:
            serializer = SeatSelectionSerializer(
                data={
                    "row": self._prompt("\nEnter a row number:"),
                    "seat": self._prompt("Enter a seat number in that row:"),
                }
            )
            if not serializer.is_valid():
                self._say(f"\n{WRONG_INPUT}")
                continue

            result = self._service.buy_ticket(**serializer.validated_data)
            if not isinstance(result, Err):
                self._say(f"\nTicket price: ${result.value}")
                return
            if result.code is ErrorCode.INVALID_COORDINATE:
                self._say(f"\n{WRONG_INPUT}")
            elif result.code is ErrorCode.SEAT_ALREADY_SOLD:
                self._say(f"\n{ALREADY_PURCHASED}")
            else:
                self._say(f"\n{result.error.message}")
                return

    def show_statistics(self) -> None:
        result = self._service.statistics()
        if isinstance(result, Err):
            self._say(f"\n{result.error.message}")
            return
        self._say("\n" + format_statistics(result.value))

    def _read_choice(self) -> MenuChoice | None:
        serializer = MenuChoiceSerializer(data={"choice": self._readline()})
        if not serializer.is_valid():
            return None
        return serializer.validated_data["choice"]

    def _prompt(self, text: str) -> str:
        self._say(text)
        return self._readline()

    def _readline(self) -> str:
        line = self._stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def _say(self, text: str) -> None:
        self._stdout.write(f"{text}\n")


def format_statistics(statistics: Statistics) -> str:
    data = StatisticsSerializer(statistics).data
    return "\n".join(
        [
            f"Number of purchased tickets: {data['sold_count']}",
            f"Percentage: {data['sold_percentage']:.2f}%",
            f"Current income: ${data['current_income']}",
            f"Total income: ${data['possible_income']}",
        ]
    )

"""In-memory implementation of the TheatreStore.

The theatre lives for the lifetime of the process only.
"""

from cinema.domain import Theatre
from cinema.stores.interfaces import TheatreStore


class InMemoryTheatreStore(TheatreStore):
    """Process-local theatre store."""

    def __init__(self) -> None:
        self._theatre: Theatre | None = None

    def get_theatre(self) -> Theatre | None:
        return self._theatre

    def save_theatre(self, theatre: Theatre) -> None:
        self._theatre = theatre

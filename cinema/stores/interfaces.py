"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod

from cinema.domain import Theatre


class TheatreStore(ABC):
    """Interface for holding the active theatre."""

    @abstractmethod
    def get_theatre(self) -> Theatre | None:
        """Return the active theatre, or None if none has been opened."""
        ...

    @abstractmethod
    def save_theatre(self, theatre: Theatre) -> None:
        """Make the given theatre the active one."""
        ...

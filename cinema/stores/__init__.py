from cinema.stores.interfaces import TheatreStore
from cinema.stores.memory_store import InMemoryTheatreStore

__all__ = ["TheatreStore", "InMemoryTheatreStore"]

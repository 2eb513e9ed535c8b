"""Pytest configuration and shared fixtures."""

import pytest

from cinema.domain import Theatre
from cinema.services import TheatreService
from cinema.stores import InMemoryTheatreStore


@pytest.fixture
def store() -> InMemoryTheatreStore:
    return InMemoryTheatreStore()


@pytest.fixture
def service(store: InMemoryTheatreStore) -> TheatreService:
    return TheatreService(store)


@pytest.fixture
def small_theatre() -> Theatre:
    return Theatre.open(4, 4)


@pytest.fixture
def large_theatre() -> Theatre:
    return Theatre.open(8, 8)

"""Tagged results returned across the service boundary."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from cinema.domain.errors import DomainError, ErrorCode

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the domain error that caused it."""

    error: DomainError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def code(self) -> ErrorCode:
        return self.error.code


Result = Union[Ok[T], Err]

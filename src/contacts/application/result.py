"""Result of a fetch: exactly one of Success or Failure, routed with side-effecting handlers."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from contacts.domain import ContactError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A successful fetch carrying its payload."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    def on_success(self, fn: Callable[[T], None]) -> None:
        fn(self.value)

    def on_failure(self, fn: Callable[[ContactError], None]) -> None:
        return None


@dataclass(frozen=True)
class Failure:
    """A failed fetch carrying the error kind. No payload beyond the kind."""

    error: ContactError

    @property
    def is_success(self) -> bool:
        return False

    def on_success(self, fn: Callable[[T], None]) -> None:
        return None

    def on_failure(self, fn: Callable[[ContactError], None]) -> None:
        fn(self.error)


Result = Union[Success[T], Failure]

"""Result values returned by fetch operations."""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from .errors import FetchError

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Fetch completed and the body decoded."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    """Fetch failed; `error` says how."""

    error: FetchError

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self):
        """Raise the carried error."""
        raise self.error


FetchOutcome = Union[Success[T], Failure]

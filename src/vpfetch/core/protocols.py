"""Protocol definitions for fetch components."""

from typing import Protocol, TypeVar, runtime_checkable

import httpx

from .outcome import FetchOutcome

T_co = TypeVar("T_co", covariant=True)

Session = httpx.AsyncClient


class Reporting(Protocol):
    """Sink for human-readable diagnostics. Must not raise."""

    def info(self, message: str) -> None:
        ...

    def debug(self, message: str) -> None:
        ...


@runtime_checkable
class Fetching(Protocol[T_co]):
    """Protocol for typed fetchers."""

    trust_any_certificate: bool

    async def fetch(
        self, url: str | httpx.URL, session: Session | None = None
    ) -> FetchOutcome[T_co]:
        """Fetch a URL and decode the body."""
        ...

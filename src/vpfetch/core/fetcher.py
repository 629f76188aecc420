"""Typed HTTP fetcher using httpx."""

import asyncio
from typing import Callable, Generic, TypeVar

import httpx
from pydantic import TypeAdapter

from ..config import FetchSettings, settings as default_settings
from .errors import (
    DecodingError,
    FetchError,
    InvalidResponse,
    InvalidStatusCode,
    InvalidUrl,
    NetworkError,
)
from .outcome import Failure, FetchOutcome, Success
from .protocols import Reporting
from .reporting import LogReporter
from .transport import TransportPolicy, select_session

T = TypeVar("T")

HTTP_STATUS_OK_MIN = 200
HTTP_STATUS_OK_MAX = 299


def is_success_status(status: int) -> bool:
    """Check whether a status code is in the inclusive 2xx range."""
    return HTTP_STATUS_OK_MIN <= status <= HTTP_STATUS_OK_MAX


class Fetcher(Generic[T]):
    """Async fetcher that decodes response bodies into `payload_type`.

    Every call returns exactly one `FetchOutcome`; failures come back as
    `Failure` values. Cancellation is not caught.
    """

    def __init__(
        self,
        payload_type: type[T],
        *,
        trust_any_certificate: bool | None = None,
        reporter: Reporting | None = None,
        decoder: Callable[[bytes], T] | None = None,
        settings: FetchSettings | None = None,
    ):
        self.payload_type = payload_type
        self.settings = settings or default_settings
        if trust_any_certificate is None:
            trust_any_certificate = self.settings.trust_any_certificate
        self.trust_any_certificate = trust_any_certificate
        self.reporter: Reporting = reporter or LogReporter()
        self._decoder = decoder or TypeAdapter(payload_type).validate_json
        self._client: httpx.AsyncClient | None = None
        self._lock = asyncio.Lock()

    @property
    def policy(self) -> TransportPolicy:
        return TransportPolicy(trust_any_certificate=self.trust_any_certificate)

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the shared default client with double-checked locking."""
        if self._client is None:
            async with self._lock:
                if self._client is None:
                    self._client = httpx.AsyncClient(
                        timeout=httpx.Timeout(self.settings.timeout),
                        limits=httpx.Limits(
                            max_connections=self.settings.max_connections,
                            max_keepalive_connections=self.settings.max_keepalive_connections,
                        ),
                        headers={"User-Agent": self.settings.user_agent},
                        follow_redirects=self.settings.follow_redirects,
                    )
        return self._client

    async def fetch(
        self, url: str | httpx.URL, session: httpx.AsyncClient | None = None
    ) -> FetchOutcome[T]:
        """Fetch a URL and decode the body into the payload type."""
        received = await self._get(url, session)
        if isinstance(received, Failure):
            return received

        response = received.value
        try:
            value = self._decoder(response.content)
        except Exception as exc:
            return self._fail(DecodingError(exc))

        self.reporter.info(f"Status code: {response.status_code}")
        return Success(value)

    async def fetch_text(
        self, url: str | httpx.URL, session: httpx.AsyncClient | None = None
    ) -> FetchOutcome[str]:
        """Fetch a URL and return the body as UTF-8 text."""
        received = await self._get(url, session)
        if isinstance(received, Failure):
            return received

        try:
            text = received.value.content.decode("utf-8")
        except UnicodeDecodeError as exc:
            cause = ValueError(f"Failed to convert data to string: {exc.reason}")
            return self._fail(DecodingError(cause))
        return Success(text)

    async def _get(
        self, url: str | httpx.URL, session: httpx.AsyncClient | None
    ) -> FetchOutcome[httpx.Response]:
        """Issue the GET and validate the status; the body is read only on 2xx."""
        try:
            target = httpx.URL(url)
        except httpx.InvalidURL:
            return self._fail(InvalidUrl(str(url)))

        policy = self.policy
        if session is None and not policy.trust_any_certificate:
            session = await self._get_client()
        client = select_session(policy, session, self.settings)
        try:
            async with client.stream("GET", target) as response:
                status = response.status_code or 0
                if not is_success_status(status):
                    return self._fail(InvalidStatusCode(str(target), status))
                await response.aread()
                return Success(response)
        except httpx.UnsupportedProtocol:
            return self._fail(InvalidUrl(str(target)))
        except httpx.TransportError as exc:
            return self._fail(NetworkError(exc))
        except (httpx.DecodingError, httpx.TooManyRedirects) as exc:
            return self._fail(InvalidResponse(str(exc)))
        except httpx.RequestError as exc:
            return self._fail(NetworkError(exc))
        finally:
            if client is not session:
                await client.aclose()

    def _fail(self, error: FetchError) -> Failure:
        self.reporter.debug(f"error: {error}")
        return Failure(error)

    async def close(self):
        """Close the shared default client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "Fetcher[T]":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

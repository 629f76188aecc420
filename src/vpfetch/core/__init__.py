"""Core fetch components."""

from .errors import (
    DecodingError,
    FetchError,
    InvalidResponse,
    InvalidStatusCode,
    InvalidUrl,
    NetworkError,
)
from .fetcher import Fetcher, is_success_status
from .outcome import Failure, FetchOutcome, Success
from .protocols import Fetching, Reporting, Session
from .reporting import LogReporter
from .transport import TransportPolicy, select_session, trust_any_certificate_context

__all__ = [
    "Fetcher",
    "Fetching",
    "Reporting",
    "Session",
    "LogReporter",
    "FetchOutcome",
    "Success",
    "Failure",
    "FetchError",
    "InvalidUrl",
    "NetworkError",
    "InvalidResponse",
    "InvalidStatusCode",
    "DecodingError",
    "TransportPolicy",
    "select_session",
    "trust_any_certificate_context",
    "is_success_status",
]

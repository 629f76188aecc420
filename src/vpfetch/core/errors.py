"""Closed error taxonomy for fetch operations."""


class FetchError(Exception):
    """Base class for every failure a fetch can produce."""


class InvalidUrl(FetchError):
    """The URL could not be parsed or uses a scheme we cannot fetch."""

    def __init__(self, url: str = ""):
        self.url = url
        super().__init__(f"invalid url: {url!r}" if url else "invalid url")


class NetworkError(FetchError):
    """Transport-level failure: DNS, refused connection, timeout, TLS."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        self.__cause__ = cause
        super().__init__(f"network error: {_describe(cause)}")


class InvalidResponse(FetchError):
    """A response arrived but its body could not be transferred."""

    def __init__(self, reason: str = ""):
        self.reason = reason
        super().__init__(f"invalid response: {reason}" if reason else "invalid response")


class InvalidStatusCode(FetchError):
    """HTTP status outside 200-299."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"invalid status code {status_code} for {url}")


class DecodingError(FetchError):
    """The body could not be decoded into the requested shape."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        self.__cause__ = cause
        super().__init__(f"decoding error: {_describe(cause)}")


def _describe(error: BaseException) -> str:
    # pydantic errors span several lines; diagnostics are single-line
    lines = str(error).splitlines()
    return lines[0] if lines else type(error).__name__

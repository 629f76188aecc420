"""Tests for Fetcher.fetch_text."""

import httpx
import pytest

from vpfetch.core import (
    DecodingError,
    Failure,
    Fetcher,
    InvalidStatusCode,
    InvalidUrl,
    NetworkError,
    Success,
)

JWT_URL = "https://verifier.example.com/request.jwt"


@pytest.fixture
def fetcher(reporter):
    return Fetcher(str, reporter=reporter)


class TestFetchText:
    async def test_returns_utf8_text(self, fetcher, httpx_mock):
        """Should return the body decoded as UTF-8."""
        httpx_mock.add_response(url=JWT_URL, content="eyJhbGciOiJFUzI1NiJ9.é".encode("utf-8"))

        async with fetcher:
            outcome = await fetcher.fetch_text(JWT_URL)

        assert outcome == Success("eyJhbGciOiJFUzI1NiJ9.é")

    async def test_success_has_no_info_diagnostic(self, fetcher, reporter, httpx_mock):
        """The text path does not report the status code."""
        httpx_mock.add_response(url=JWT_URL, text="plain")

        async with fetcher:
            await fetcher.fetch_text(JWT_URL)

        assert reporter.infos == []
        assert reporter.debugs == []

    async def test_empty_body(self, fetcher, httpx_mock):
        """An empty 200 body is valid text."""
        httpx_mock.add_response(url=JWT_URL, content=b"")

        async with fetcher:
            outcome = await fetcher.fetch_text(JWT_URL)

        assert outcome.unwrap() == ""

    async def test_invalid_utf8_is_decoding_error(self, fetcher, reporter, httpx_mock):
        """Bytes that are not UTF-8 should be a DecodingError."""
        httpx_mock.add_response(url=JWT_URL, content=b"\xff\xfe\xfa")

        async with fetcher:
            outcome = await fetcher.fetch_text(JWT_URL)

        assert isinstance(outcome, Failure)
        assert isinstance(outcome.error, DecodingError)
        assert "Failed to convert data to string" in str(outcome.error)
        assert len(reporter.debugs) == 1

    async def test_invalid_status_code(self, fetcher, httpx_mock):
        """Non-2xx status should fail the same way as the typed path."""
        httpx_mock.add_response(url=JWT_URL, status_code=403, text="forbidden")

        async with fetcher:
            outcome = await fetcher.fetch_text(JWT_URL)

        assert isinstance(outcome.error, InvalidStatusCode)
        assert outcome.error.status_code == 403

    async def test_network_error(self, fetcher, httpx_mock):
        """Connection failures come back as NetworkError values."""
        httpx_mock.add_exception(httpx.ConnectError("Name or service not known"), url=JWT_URL)

        async with fetcher:
            outcome = await fetcher.fetch_text(JWT_URL)

        assert isinstance(outcome.error, NetworkError)

    async def test_setup_failure_is_returned_not_raised(self, fetcher):
        """An unusable URL should produce a Failure value instead of raising."""
        outcome = await fetcher.fetch_text("https://verifier.example.com/\x01")

        assert isinstance(outcome.error, InvalidUrl)

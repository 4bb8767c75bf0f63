"""
Tests for ErrorHandler: status classification, Retry-After and transport errors.
"""

import asyncio
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime

import httpx
import pytest

from klaviyo_client.core.error_handler import ErrorHandler
from klaviyo_client.core.exceptions import (
    AuthenticationError,
    GenericApiError,
    RateLimitError,
    RequestTimeoutError,
    ServerError,
    TransportError,
)


class TestClassify:

    def test_200_is_success(self):
        assert ErrorHandler.classify(200, '{"ok":true}') is None

    def test_403_authentication(self):
        error = ErrorHandler.classify(403, '{"status":403}')
        assert isinstance(error, AuthenticationError)
        assert error.status_code == 403
        assert error.body == '{"status":403}'

    def test_429_with_retry_after(self):
        error = ErrorHandler.classify(429, "", {"Retry-After": "5"})
        assert isinstance(error, RateLimitError)
        assert error.retry_after == 5

    def test_429_without_retry_after(self):
        error = ErrorHandler.classify(429, "")
        assert isinstance(error, RateLimitError)
        assert error.retry_after is None

    @pytest.mark.parametrize("status", [500, 503])
    def test_server_errors(self, status):
        error = ErrorHandler.classify(status, "down")
        assert isinstance(error, ServerError)
        assert error.status_code == status

    @pytest.mark.parametrize("status", [201, 204, 301, 400, 401, 404, 502, 504])
    def test_everything_else_is_generic(self, status):
        error = ErrorHandler.classify(status, "x")
        assert type(error) is GenericApiError
        assert error.status_code == status

    def test_pure(self):
        first = ErrorHandler.classify(403, "body")
        second = ErrorHandler.classify(403, "body")
        assert first is not second
        assert (first.status_code, first.body) == (second.status_code, second.body)


class TestParseRetryAfter:

    def test_seconds(self):
        assert ErrorHandler.parse_retry_after({"Retry-After": "120"}) == 120

    def test_case_insensitive_dict(self):
        assert ErrorHandler.parse_retry_after({"retry-after": "7"}) == 7

    def test_httpx_headers(self):
        headers = httpx.Headers({"RETRY-AFTER": "3"})
        assert ErrorHandler.parse_retry_after(headers) == 3

    def test_http_date_in_future(self):
        when = datetime.now(timezone.utc) + timedelta(seconds=60)
        value = ErrorHandler.parse_retry_after({"Retry-After": format_datetime(when, usegmt=True)})
        assert 55 <= value <= 61

    def test_http_date_in_past_is_zero(self):
        when = datetime.now(timezone.utc) - timedelta(hours=1)
        assert ErrorHandler.parse_retry_after({"Retry-After": format_datetime(when, usegmt=True)}) == 0

    @pytest.mark.parametrize("headers", [
        None,
        {},
        {"Retry-After": ""},
        {"Retry-After": "soon"},
        {"Retry-After": "-5"},
        {"Retry-After": "1" * 101},
        {"Retry-After": "\u00b2"},
        {"Retry-After": "\u0663"},
    ])
    def test_invalid_values(self, headers):
        assert ErrorHandler.parse_retry_after(headers) is None


class TestHandleTransportException:

    URL = "https://a.klaviyo.com/api/v1/metrics?api_key=pk_secret"

    def test_httpx_timeout(self):
        error = ErrorHandler.handle_transport_exception(httpx.ReadTimeout("timed out"), self.URL, 30)
        assert isinstance(error, RequestTimeoutError)
        assert error.timeout == 30

    def test_asyncio_timeout(self):
        error = ErrorHandler.handle_transport_exception(asyncio.TimeoutError(), self.URL, 30)
        assert isinstance(error, RequestTimeoutError)

    def test_connect_error(self):
        error = ErrorHandler.handle_transport_exception(httpx.ConnectError("refused"), self.URL)
        assert type(error) is TransportError
        assert "Connection error" in str(error)

    def test_protocol_error(self):
        error = ErrorHandler.handle_transport_exception(
            httpx.RemoteProtocolError("peer closed connection"), self.URL
        )
        assert type(error) is TransportError
        assert "Request failed" in str(error)

    def test_url_is_masked(self):
        error = ErrorHandler.handle_transport_exception(httpx.ConnectError("refused"), self.URL)
        assert "pk_secret" not in str(error)
        assert "pk_secret" not in error.url

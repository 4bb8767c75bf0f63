# src/klaviyo_client/core/error_handler.py

import asyncio
import logging
import math
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Mapping, Optional

import httpx

from ..utils.sanitizer import mask_url
from .exceptions import (
    ApiError,
    AuthenticationError,
    GenericApiError,
    RateLimitError,
    RequestTimeoutError,
    ServerError,
    TransportError,
)

logger = logging.getLogger(__name__)

# Нормальные значения: "60" или "Wed, 21 Oct 2015 07:28:00 GMT"
MAX_RETRY_AFTER_LENGTH = 100

SERVER_ERROR_CODES = frozenset({500, 503})


class ErrorHandler:
    """Классификация ответов и сетевых ошибок в исключения клиента"""

    @staticmethod
    def classify(
        status_code: int,
        body: str = "",
        headers: Optional[Mapping[str, str]] = None,
    ) -> Optional[ApiError]:
        """
        Чистая функция (status_code, body, headers) -> ошибка или None.

        Returns:
            None для 200, иначе экземпляр ApiError нужного варианта
        """
        if status_code == 200:
            return None

        if status_code == 403:
            return AuthenticationError(status_code, body)

        if status_code == 429:
            retry_after = ErrorHandler.parse_retry_after(headers)
            return RateLimitError(status_code, body, retry_after=retry_after)

        if status_code in SERVER_ERROR_CODES:
            return ServerError(status_code, body)

        return GenericApiError(status_code, body)

    @staticmethod
    def parse_retry_after(headers: Optional[Mapping[str, str]]) -> Optional[int]:
        """
        Распарсить Retry-After header в целые секунды.

        Поддерживает число секунд и HTTP-date. Некорректные, слишком длинные
        и отрицательные значения дают None.
        """
        if not headers:
            return None

        retry_after = _get_header(headers, "retry-after")
        if not retry_after:
            return None

        retry_after = retry_after.strip()
        if len(retry_after) > MAX_RETRY_AFTER_LENGTH:
            logger.warning(
                "Retry-After header too long (%d chars), ignoring", len(retry_after)
            )
            return None

        if retry_after.isascii() and retry_after.isdigit():
            return int(retry_after)

        try:
            retry_date = parsedate_to_datetime(retry_after)
        except (ValueError, TypeError, IndexError, OverflowError):
            logger.debug("Failed to parse Retry-After header %r", retry_after)
            return None

        if retry_date.tzinfo is None:
            retry_date = retry_date.replace(tzinfo=timezone.utc)
        delta = (retry_date - datetime.now(timezone.utc)).total_seconds()
        return max(0, math.ceil(delta))

    @staticmethod
    def handle_transport_exception(
        error: BaseException,
        url: str,
        timeout: Optional[float] = None,
    ) -> TransportError:
        """
        Конвертировать httpx / asyncio исключения в TransportError.

        URL маскируется: в query могут быть api_key или data с token.
        """
        safe_url = mask_url(url)

        if isinstance(error, (httpx.TimeoutException, asyncio.TimeoutError)):
            return RequestTimeoutError("Request timeout", safe_url, timeout)

        if isinstance(error, httpx.ConnectError):
            return TransportError(f"Connection error: {_describe(error)}", safe_url)

        if isinstance(error, httpx.HTTPError):
            return TransportError(f"Request failed: {_describe(error)}", safe_url)

        return TransportError(f"Unexpected transport error: {_describe(error)}", safe_url)


def _get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    # httpx.Headers уже case-insensitive, обычный dict - нет
    if isinstance(headers, httpx.Headers):
        return headers.get(name)
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def _describe(error: BaseException) -> str:
    detail = mask_url(str(error))
    return f"{type(error).__name__}: {detail}" if detail else type(error).__name__

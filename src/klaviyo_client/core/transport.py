# src/klaviyo_client/core/transport.py
"""
Асинхронный транспорт на базе httpx.

Один вызов perform() = один HTTP round trip: без retry, без streaming.
Ответ буферизуется целиком, классифицируется ErrorHandler и декодируется
по правилу конвенции (JSON или pass/fail цифра).
"""

import asyncio
import itertools
import json
import time
from typing import Any, Dict, Optional

import httpx

from ..utils.sanitizer import mask_url
from .config import KlaviyoClientConfig
from .error_handler import ErrorHandler
from .exceptions import ApiError, InvalidResponseError, KlaviyoError
from .logging import DEFAULT_LOGGER_NAME, ClientLogger
from .request import RequestSpec, ResponseFormat

EMPTY_BODY_PLACEHOLDER = "{}"

# Суффикс логгера: у каждого транспорта свой klaviyo_client.transport.<n>
_transport_ids = itertools.count(1)


class AsyncTransport:
    """
    Выполняет RequestSpec против Klaviyo API.

    Не хранит состояние между вызовами (кроме пула соединений httpx),
    поэтому конкурентные perform() безопасны.

    Example:
        >>> async with AsyncTransport(KlaviyoClientConfig()) as transport:
        ...     spec = build_v1_request("metrics", "GET", {}, "pk_...")
        ...     payload = await transport.perform(spec)
    """

    def __init__(self, config: Optional[KlaviyoClientConfig] = None):
        """
        Args:
            config: Конфигурация клиента (None = значения по умолчанию)
        """
        self._config = config or KlaviyoClientConfig()

        # Свой логгер на экземпляр: разные LoggingConfig не перетирают друг друга
        self.logger_name = f"{DEFAULT_LOGGER_NAME}.{next(_transport_ids)}"
        self._logger: Optional[ClientLogger] = None

        # Клиент (и логгер) создаются лениво или при входе в context manager
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def config(self) -> KlaviyoClientConfig:
        return self._config

    async def _get_client(self) -> httpx.AsyncClient:
        """Получить или создать httpx клиент."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._config.timeout.as_httpx(),
                verify=self._config.verify_ssl,
                follow_redirects=False,
            )
            if self._config.logging and self._logger is None:
                self._logger = ClientLogger(self._config.logging, name=self.logger_name)
        return self._client

    async def __aenter__(self) -> "AsyncTransport":
        await self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Закрыть httpx клиент и снять handlers логгера. Повторный вызов безопасен."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        if self._logger is not None:
            self._logger.close()
            self._logger = None

    # ==================== Запрос ====================

    def _build_headers(self, spec: RequestSpec) -> Dict[str, str]:
        headers = dict(self._config.headers)
        headers.update(spec.headers)
        if not any(name.lower() == "user-agent" for name in headers):
            headers["User-Agent"] = self._config.effective_user_agent
        return headers

    async def perform(self, spec: RequestSpec) -> Any:
        """
        Выполнить запрос.

        Returns:
            Распарсенный JSON (ResponseFormat.JSON) или int (ResponseFormat.PASS_FAIL)

        Raises:
            ApiError: Ответ со статусом, отличным от 200 (конкретный подкласс по статусу)
            TransportError: Ошибка соединения / протокола
            RequestTimeoutError: Превышен таймаут
            InvalidResponseError: 200, но тело не декодируется
        """
        url = f"{self._config.base_url}{spec.path}"
        safe_url = mask_url(url)
        total_timeout = self._config.timeout.total
        content = spec.body.encode("utf-8") if spec.body is not None else None

        client = await self._get_client()
        self._log_debug(
            "Request started",
            method=spec.method.value,
            url=safe_url,
            request_id=spec.request_id,
        )

        started = time.monotonic()

        try:
            send = client.request(
                spec.method.value,
                url,
                headers=self._build_headers(spec),
                content=content,
            )
            if total_timeout is not None:
                response = await asyncio.wait_for(send, timeout=total_timeout)
            else:
                response = await send
        except (httpx.HTTPError, asyncio.TimeoutError) as exc:
            error = ErrorHandler.handle_transport_exception(exc, url, total_timeout)
            self._log_failure(spec, safe_url, started, error)
            raise error from exc

        elapsed_ms = _elapsed_ms(started)
        body = response.text

        error = ErrorHandler.classify(response.status_code, body, response.headers)
        if error is not None:
            self._log_failure(spec, safe_url, started, error)
            raise error

        payload = self._decode(spec, body)

        if self._logger:
            self._logger.info(
                "Request completed",
                method=spec.method.value,
                url=safe_url,
                status_code=response.status_code,
                elapsed_ms=elapsed_ms,
                request_id=spec.request_id,
            )

        return payload

    @staticmethod
    def _decode(spec: RequestSpec, body: str) -> Any:
        if spec.response_format is ResponseFormat.PASS_FAIL:
            try:
                return int(body.strip())
            except ValueError:
                raise InvalidResponseError(
                    "Public API returned a non-numeric response", body
                ) from None

        try:
            return json.loads(body or EMPTY_BODY_PLACEHOLDER)
        except ValueError:
            raise InvalidResponseError("Response body is not valid JSON", body) from None

    # ==================== Логирование ====================

    def _log_debug(self, message: str, **fields: Any) -> None:
        if self._logger:
            self._logger.debug(message, **fields)

    def _log_failure(
        self,
        spec: RequestSpec,
        safe_url: str,
        started: float,
        error: KlaviyoError,
    ) -> None:
        if not self._logger:
            return

        fields: Dict[str, Any] = {
            "method": spec.method.value,
            "url": safe_url,
            "elapsed_ms": _elapsed_ms(started),
            "request_id": spec.request_id,
            "error_type": type(error).__name__,
        }
        if isinstance(error, ApiError):
            fields["status_code"] = error.status_code
            fields["kind"] = error.kind.value
        fields["retryable"] = error.retryable

        self._logger.warning("Request failed", **fields)


def _elapsed_ms(started: float) -> float:
    return round((time.monotonic() - started) * 1000, 2)

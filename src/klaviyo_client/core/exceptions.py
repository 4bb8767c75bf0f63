"""
Иерархия исключений Klaviyo клиента.

Классификация:
- ConfigurationError - неверные учётные данные или аргументы, до любого I/O
- ApiError - ответ API со статусом != 200 (тег kind: ApiErrorKind)
- TransportError - сеть/DNS/таймаут, ответа нет
- InvalidResponseError - 200 OK, но тело не декодируется

retryable=True помечает ошибки, которые вызывающий код может повторить.
Сам клиент никогда не повторяет запросы.
"""

from enum import Enum
from typing import Any, Dict, Optional

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class KlaviyoError(Exception):
    """Базовое исключение Klaviyo клиента."""

    retryable: bool = False

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(KlaviyoError):
    """
    Ошибка конфигурации или валидации аргументов.

    Примеры:
    - Клиент создан без токенов
    - Доступ к приватным ресурсам без private token
    - Не передан обязательный идентификатор (profile_id, list_id, ...)
    """
    pass

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# API ERRORS (получен HTTP ответ)
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class ApiErrorKind(str, Enum):
    """Тег варианта ApiError."""
    GENERIC = "generic"
    AUTHENTICATION = "authentication"
    RATE_LIMIT = "rate_limit"
    SERVER = "server"


class ApiError(KlaviyoError):
    """
    Базовая ошибка ответа API.

    Args:
        status_code: HTTP статус
        body: Сырое тело ответа (текст)

    Attributes:
        kind: Вариант ошибки (ApiErrorKind)
    """

    kind: ApiErrorKind = ApiErrorKind.GENERIC

    def __init__(self, status_code: int, body: str = "", message: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"Request failed with status code: {status_code}")

    def to_dict(self) -> Dict[str, Any]:
        """Словарь для структурированных логов."""
        return {
            "error": self.__class__.__name__,
            "kind": self.kind.value,
            "status_code": self.status_code,
            "retryable": self.retryable,
            "message": self.message,
        }


class GenericApiError(ApiError):
    """Любой не-200 статус без отдельной классификации (400, 404, ...)."""
    kind = ApiErrorKind.GENERIC


class AuthenticationError(ApiError):
    """403 - неверный или отозванный private token."""
    kind = ApiErrorKind.AUTHENTICATION


class RateLimitError(ApiError):
    """
    429 Rate Limit.

    Args:
        status_code: HTTP статус (429)
        body: Сырое тело ответа
        retry_after: Retry-After в секундах (None если заголовка нет)
    """
    kind = ApiErrorKind.RATE_LIMIT
    retryable = True

    def __init__(self, status_code: int, body: str = "", retry_after: Optional[int] = None):
        self.retry_after = retry_after

        msg = f"Request failed with status code: {status_code}"
        if retry_after is not None:
            msg += f" (retry after {retry_after}s)"

        super().__init__(status_code, body, msg)

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["retry_after"] = self.retry_after
        return data


class ServerError(ApiError):
    """500 / 503 на стороне Klaviyo."""
    kind = ApiErrorKind.SERVER
    retryable = True

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TRANSPORT ERRORS (ответа нет)
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class TransportError(KlaviyoError):
    """
    Сетевая ошибка: connection refused, DNS, обрыв соединения.

    Args:
        message: Сообщение об ошибке
        url: URL запроса (уже замаскированный)
    """
    retryable = True

    def __init__(self, message: str, url: Optional[str] = None):
        self.url = url
        full_message = message
        if url:
            full_message += f" (url: {url})"
        super().__init__(full_message)


class RequestTimeoutError(TransportError):
    """
    Таймаут запроса.

    Args:
        message: Сообщение об ошибке
        url: URL запроса
        timeout: Значение таймаута (сек)
    """

    def __init__(self, message: str, url: Optional[str] = None, timeout: Optional[float] = None):
        self.timeout = timeout
        msg = message
        if timeout:
            msg += f" (timeout: {timeout}s)"
        super().__init__(msg, url)

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# RESPONSE DECODING
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class InvalidResponseError(KlaviyoError):
    """
    Ответ 200, но тело не соответствует формату конвенции.

    Примеры:
    - Битый JSON от v1/v2
    - Не цифра 1/0 от public tracking
    """

    def __init__(self, message: str, body: str = ""):
        self.body = body
        super().__init__(message)

"""Core модули Klaviyo клиента: транспорт, запросы, ошибки, конфиг."""

from .config import (
    TimeoutConfig,
    KlaviyoClientConfig,
    DEFAULT_HOST,
    DEFAULT_USER_AGENT,
)
from .exceptions import (
    KlaviyoError,
    ConfigurationError,
    ApiErrorKind,
    ApiError,
    GenericApiError,
    AuthenticationError,
    RateLimitError,
    ServerError,
    TransportError,
    RequestTimeoutError,
    InvalidResponseError,
)
from .request import (
    HTTPMethod,
    ResponseFormat,
    RequestSpec,
    inject_api_key,
    inject_public_token,
    build_v1_request,
    build_v2_request,
    build_public_request,
)
from .error_handler import ErrorHandler
from .transport import AsyncTransport
from .api import PrivateApi, PublicApi

__all__ = [
    # Config
    "TimeoutConfig",
    "KlaviyoClientConfig",
    "DEFAULT_HOST",
    "DEFAULT_USER_AGENT",
    # Requests
    "HTTPMethod",
    "ResponseFormat",
    "RequestSpec",
    "inject_api_key",
    "inject_public_token",
    "build_v1_request",
    "build_v2_request",
    "build_public_request",
    # Transport
    "ErrorHandler",
    "AsyncTransport",
    "PrivateApi",
    "PublicApi",
    # Exceptions
    "KlaviyoError",
    "ConfigurationError",
    "ApiErrorKind",
    "ApiError",
    "GenericApiError",
    "AuthenticationError",
    "RateLimitError",
    "ServerError",
    "TransportError",
    "RequestTimeoutError",
    "InvalidResponseError",
]

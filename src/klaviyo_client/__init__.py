"""Klaviyo Client - async client for the Klaviyo marketing API."""

import logging

from .client import Klaviyo
from .core.config import KlaviyoClientConfig, TimeoutConfig, PACKAGE_VERSION
from .core.env_config import load_from_env, KlaviyoSettings
from .core.logging import LoggingConfig
from .core.exceptions import (
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
from .resources import ExportQuery, CampaignOptions, CampaignUpdate

# NullHandler: без настройки логирования приложением библиотека молчит.
# Настроить можно через logging.getLogger('klaviyo_client') или LoggingConfig.
logging.getLogger('klaviyo_client').addHandler(logging.NullHandler())

__version__ = PACKAGE_VERSION
__license__ = "MIT"

__all__ = [
    # Client
    "Klaviyo",

    # Config
    "KlaviyoClientConfig",
    "TimeoutConfig",
    "LoggingConfig",
    "KlaviyoSettings",
    "load_from_env",

    # Parameter objects
    "ExportQuery",
    "CampaignOptions",
    "CampaignUpdate",

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

    "__version__",
]

"""
Structured logging for the Klaviyo client.

Example:
    >>> from klaviyo_client.core.logging import ClientLogger, LoggingConfig
    >>>
    >>> config = LoggingConfig.create(level="DEBUG", format="json")
    >>> logger = ClientLogger(config)
    >>> logger.info("Request started", method="GET", url="/api/v1/metrics")
"""

from .config import LoggingConfig, LogLevel, LogFormat
from .formatters import JSONFormatter, TextFormatter, get_formatter
from .logger import ClientLogger, ExtraFieldsFilter, DEFAULT_LOGGER_NAME

__all__ = [
    # Config
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    # Logger
    "ClientLogger",
    "ExtraFieldsFilter",
    "DEFAULT_LOGGER_NAME",
    # Formatters
    "JSONFormatter",
    "TextFormatter",
    "get_formatter",
]

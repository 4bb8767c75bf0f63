"""
Logger used by the transport.

Every keyword field passes through ``mask_sensitive_data`` before it
reaches a handler, so ``api_key`` / ``token`` values never get logged.
"""

import logging
import sys
from typing import Any, Dict, Optional

from ...utils.sanitizer import mask_sensitive_data
from .config import LoggingConfig, LogLevel
from .formatters import get_formatter

DEFAULT_LOGGER_NAME = "klaviyo_client.transport"


class ExtraFieldsFilter(logging.Filter):
    """Adds static fields (service, environment, ...) to every record."""

    def __init__(self, extra_fields: Dict[str, Any]):
        super().__init__()
        self.extra_fields = extra_fields

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.extra_fields.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


class ClientLogger:
    """
    Thin wrapper over ``logging.Logger`` with masking of structured fields.

    Example:
        >>> logger = ClientLogger(LoggingConfig.create(level="DEBUG", format="json"))
        >>> logger.info("Request started", method="GET", url="/api/v1/metrics?api_key=pk")
        >>> logger.close()
    """

    def __init__(self, config: Optional[LoggingConfig] = None, name: str = DEFAULT_LOGGER_NAME):
        self.config = config or LoggingConfig()
        self.name = name
        self._closed = False

        self._logger = logging.getLogger(name)
        self._logger.setLevel(self._get_level(self.config.level))
        self._logger.handlers.clear()
        self._logger.filters.clear()

        if self.config.extra_fields:
            self._logger.addFilter(ExtraFieldsFilter(mask_sensitive_data(self.config.extra_fields)))

        # Console handler owns the output, otherwise the application's handlers do
        self._logger.propagate = not self.config.enable_console

        if self.config.enable_console:
            handler = logging.StreamHandler(sys.stdout)
            handler.setLevel(self._get_level(self.config.level))
            handler.setFormatter(get_formatter(self.config.format))
            self._logger.addHandler(handler)

    @staticmethod
    def _get_level(level: LogLevel) -> int:
        return getattr(logging, level.value)

    def _log(self, level: int, message: str, exc_info: bool = False, **kwargs: Any) -> None:
        self._logger.log(
            level,
            mask_sensitive_data(message),
            extra=mask_sensitive_data(kwargs),
            exc_info=exc_info,
        )

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """
        Log info message.

        Example:
            >>> logger.info("Request completed", status_code=200, elapsed_ms=150)
        """
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log at ERROR with the current traceback. Call from an except block."""
        self._log(logging.ERROR, message, exc_info=True, **kwargs)

    def close(self) -> None:
        """
        Flush and detach handlers. Idempotent.
        """
        if self._closed:
            return

        for handler in self._logger.handlers[:]:
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)
        self._logger.filters.clear()

        self._closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

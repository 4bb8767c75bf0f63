"""
Log formatters: JSON for log shippers, plain text for terminals.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Union

from .config import LogFormat

# Attributes every LogRecord has; anything else came in through ``extra``
_STANDARD_FIELDS = frozenset({
    'name', 'msg', 'args', 'created', 'filename', 'funcName',
    'levelname', 'levelno', 'lineno', 'module', 'msecs',
    'message', 'pathname', 'process', 'processName', 'relativeCreated',
    'thread', 'threadName', 'exc_info', 'exc_text', 'stack_info',
    'taskName', 'asctime',
})


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _STANDARD_FIELDS and not key.startswith('_')
    }


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Example output:
        {"timestamp": "2024-01-15T10:30:45.123000Z", "level": "INFO",
         "logger": "klaviyo_client.transport", "message": "Request completed",
         "method": "GET", "status_code": 200, "elapsed_ms": 84.2}
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        log_data: Dict[str, Any] = {
            "timestamp": timestamp.isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(_extra_fields(record))

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """
    Format: [timestamp] [level] [logger] message key=value ...
    """

    def __init__(self):
        super().__init__(
            fmt='[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    def format(self, record: logging.LogRecord) -> str:
        base_msg = super().format(record)
        extra = " ".join(f"{key}={value}" for key, value in _extra_fields(record).items())
        return f"{base_msg} {extra}" if extra else base_msg


_FORMATTERS = {
    LogFormat.JSON: JSONFormatter,
    LogFormat.TEXT: TextFormatter,
}


def get_formatter(log_format: Union[str, LogFormat]) -> logging.Formatter:
    """
    Formatter instance for a LogFormat or its name ("json" / "text").

    Raises:
        ValueError: Unknown format name
    """
    try:
        key = LogFormat(log_format.lower()) if isinstance(log_format, str) else log_format
    except ValueError:
        raise ValueError(
            f"Unknown format type: {log_format!r}. "
            f"Use one of: {', '.join(f.value for f in LogFormat)}"
        ) from None
    return _FORMATTERS[key]()

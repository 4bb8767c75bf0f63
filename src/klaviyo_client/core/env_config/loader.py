"""
Configuration loader from environment variables and .env files.
"""

from typing import Any, Optional, Tuple

from ..config import KlaviyoClientConfig, TimeoutConfig
from ..logging.config import LoggingConfig, LogFormat, LogLevel
from .settings import KlaviyoSettings


def load_settings(env_file: Optional[str] = None, **overrides: Any) -> KlaviyoSettings:
    """
    Read KlaviyoSettings.

    Priority (highest to lowest): overrides, KLAVIYO_* variables,
    the .env file, defaults.

    Args:
        env_file: Custom .env file path (None = ./.env if present)
        **overrides: Field values, e.g. ``timeout_read=5``
    """
    if env_file is not None:
        return KlaviyoSettings(_env_file=env_file, **overrides)
    return KlaviyoSettings(**overrides)


def config_from_settings(settings: KlaviyoSettings) -> KlaviyoClientConfig:
    """Build the immutable client config from validated settings."""
    timeout = TimeoutConfig(
        connect=settings.timeout_connect,
        read=settings.timeout_read,
        total=settings.timeout_total,
    )

    logging_config = None
    if settings.log_enabled:
        logging_config = LoggingConfig(
            level=LogLevel(settings.log_level),
            format=LogFormat(settings.log_format),
            enable_console=settings.log_enable_console,
        )

    return KlaviyoClientConfig(
        host=settings.host,
        port=settings.port,
        timeout=timeout,
        user_agent=settings.user_agent,
        verify_ssl=settings.verify_ssl,
        logging=logging_config,
    )


def load_from_env(env_file: Optional[str] = None, **overrides: Any) -> KlaviyoClientConfig:
    """
    Load KlaviyoClientConfig from environment variables.

    Tokens are not part of the config, see :func:`load_tokens`.

    Example:
        >>> config = load_from_env()
        >>> config = load_from_env(env_file=".env.staging", timeout_read=60)
    """
    return config_from_settings(load_settings(env_file, **overrides))


def load_tokens(env_file: Optional[str] = None, **overrides: Any) -> Tuple[Optional[str], Optional[str]]:
    """
    Read KLAVIYO_PUBLIC_TOKEN / KLAVIYO_PRIVATE_TOKEN.

    Returns:
        (public_token, private_token), each None when not set
    """
    settings = load_settings(env_file, **overrides)
    return settings.public_token_value(), settings.private_token_value()

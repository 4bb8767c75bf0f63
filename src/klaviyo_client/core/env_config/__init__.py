"""
Environment configuration for the Klaviyo client.

Example:
    >>> from klaviyo_client.core.env_config import load_from_env
    >>>
    >>> config = load_from_env()
    >>> config = load_from_env(env_file=".env.production", timeout_total=60)
"""

from .loader import config_from_settings, load_from_env, load_settings, load_tokens
from .settings import KlaviyoSettings

__all__ = [
    "KlaviyoSettings",
    "load_settings",
    "load_from_env",
    "load_tokens",
    "config_from_settings",
]

"""
Pydantic settings for environment configuration.
"""

from typing import Literal, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..config import DEFAULT_HOST, HTTPS_PORT


class KlaviyoSettings(BaseSettings):
    """
    Klaviyo client configuration from environment variables.

    Reads from:
    1. Keyword arguments
    2. Environment variables (KLAVIYO_*)
    3. .env file
    4. Defaults

    Example .env file:
        KLAVIYO_PUBLIC_TOKEN=AbC123
        KLAVIYO_PRIVATE_TOKEN=pk_0123456789abcdef
        KLAVIYO_TIMEOUT_READ=20
        KLAVIYO_LOG_ENABLED=true
        KLAVIYO_LOG_FORMAT=json

    Usage:
        >>> settings = KlaviyoSettings()
        >>> settings.host
        'a.klaviyo.com'
    """

    model_config = SettingsConfigDict(
        env_prefix='KLAVIYO_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    # Credentials (SecretStr: не попадают в repr / model_dump)
    public_token: Optional[SecretStr] = None
    private_token: Optional[SecretStr] = None

    # Connection
    host: str = Field(default=DEFAULT_HOST, min_length=1)
    port: int = Field(default=HTTPS_PORT, ge=1, le=65535)
    user_agent: Optional[str] = None
    verify_ssl: bool = True

    # Timeouts
    timeout_connect: float = Field(default=10.0, gt=0)
    timeout_read: float = Field(default=30.0, gt=0)
    timeout_total: Optional[float] = Field(default=30.0, gt=0)

    # Logging
    log_enabled: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_enable_console: bool = True

    @field_validator('public_token', 'private_token', mode='before')
    @classmethod
    def blank_token_is_none(cls, v):
        """Пустая строка в .env означает 'токен не задан'."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('log_level', mode='before')
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator('log_format', mode='before')
    @classmethod
    def normalize_format(cls, v):
        return v.lower() if isinstance(v, str) else v

    def public_token_value(self) -> Optional[str]:
        return self.public_token.get_secret_value() if self.public_token else None

    def private_token_value(self) -> Optional[str]:
        return self.private_token.get_secret_value() if self.private_token else None

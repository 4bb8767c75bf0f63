# src/klaviyo_client/client.py
"""
Точка входа библиотеки: Klaviyo.

Держит токены, один AsyncTransport и группы ресурсов. Группа доступна
только если задан нужный токен: public - для public tracking, private -
для profiles / lists / metrics / campaigns / data_privacy.
"""

from typing import Any, Optional

from .core.api import PrivateApi, PublicApi
from .core.config import KlaviyoClientConfig
from .core.env_config import config_from_settings, load_settings
from .core.exceptions import ConfigurationError
from .core.transport import AsyncTransport
from .resources import (
    Campaigns,
    DataPrivacy,
    Lists,
    Metrics,
    Profiles,
    PublicTracking,
)
from .utils.sanitizer import mask_secret

PUBLIC_TOKEN_MISSING = "Public token was not provided. Pass public_token to use the public API."
PRIVATE_TOKEN_MISSING = "Private token was not provided. Pass private_token to use this resource."


class Klaviyo:
    """
    Асинхронный клиент Klaviyo API.

    Example:
        >>> async with Klaviyo(public_token="AbC123", private_token="pk_...") as client:
        ...     await client.public.track("Viewed Product", email="jane@example.com")
        ...     profile = await client.profiles.get_profile("01ABC")

        >>> # Из переменных окружения KLAVIYO_*
        >>> client = Klaviyo.from_env()
        >>> await client.close()
    """

    def __init__(
        self,
        public_token: Optional[str] = None,
        private_token: Optional[str] = None,
        config: Optional[KlaviyoClientConfig] = None,
    ):
        """
        Args:
            public_token: Публичный ключ (public tracking API)
            private_token: Приватный ключ (v1 / v2 API)
            config: Конфигурация транспорта (None = значения по умолчанию)

        Raises:
            ConfigurationError: Не передан ни один токен
        """
        if not public_token and not private_token:
            raise ConfigurationError("Either public_token or private_token must be provided.")

        self._config = config or KlaviyoClientConfig()
        self._transport = AsyncTransport(self._config)

        self._public_token = public_token or None
        self._private_token = private_token or None

        self._public: Optional[PublicTracking] = None
        if self._public_token:
            self._public = PublicTracking(PublicApi(self._public_token, self._transport))

        self._private_api: Optional[PrivateApi] = None
        if self._private_token:
            self._private_api = PrivateApi(self._private_token, self._transport)
            self._profiles = Profiles(self._private_api)
            self._lists = Lists(self._private_api)
            self._metrics = Metrics(self._private_api)
            self._campaigns = Campaigns(self._private_api)
            self._data_privacy = DataPrivacy(self._private_api)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **overrides: Any) -> "Klaviyo":
        """
        Создать клиент из переменных окружения KLAVIYO_* (и .env файла).

        Example:
            >>> client = Klaviyo.from_env(env_file=".env.production", timeout_total=60)
        """
        settings = load_settings(env_file, **overrides)
        return cls(
            public_token=settings.public_token_value(),
            private_token=settings.private_token_value(),
            config=config_from_settings(settings),
        )

    # ==================== Tokens / config (read-only) ====================

    @property
    def public_token(self) -> Optional[str]:
        return self._public_token

    @property
    def private_token(self) -> Optional[str]:
        return self._private_token

    @property
    def config(self) -> KlaviyoClientConfig:
        return self._config

    # ==================== Resource groups ====================

    @property
    def public(self) -> PublicTracking:
        if self._public is None:
            raise ConfigurationError(PUBLIC_TOKEN_MISSING)
        return self._public

    def _require_private(self) -> None:
        if self._private_api is None:
            raise ConfigurationError(PRIVATE_TOKEN_MISSING)

    @property
    def profiles(self) -> Profiles:
        self._require_private()
        return self._profiles

    @property
    def lists(self) -> Lists:
        self._require_private()
        return self._lists

    @property
    def metrics(self) -> Metrics:
        self._require_private()
        return self._metrics

    @property
    def campaigns(self) -> Campaigns:
        self._require_private()
        return self._campaigns

    @property
    def data_privacy(self) -> DataPrivacy:
        self._require_private()
        return self._data_privacy

    # ==================== Lifecycle ====================

    async def close(self) -> None:
        """Закрыть соединения."""
        await self._transport.close()

    async def __aenter__(self) -> "Klaviyo":
        await self._transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        public = mask_secret(self._public_token) if self._public_token else None
        private = mask_secret(self._private_token) if self._private_token else None
        return f"Klaviyo(public_token={public!r}, private_token={private!r}, host={self._config.host!r})"

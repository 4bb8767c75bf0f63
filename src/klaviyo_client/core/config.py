"""
Конфигурация Klaviyo клиента.

Все конфиги immutable (frozen dataclasses), поэтому один экземпляр
можно безопасно разделять между конкурентными запросами.
"""

from dataclasses import dataclass, field, replace
from importlib.metadata import version, PackageNotFoundError
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union, TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from .logging import LoggingConfig

try:
    PACKAGE_VERSION = version("klaviyo-client-core")
except PackageNotFoundError:
    PACKAGE_VERSION = "0.0.0-dev"

DEFAULT_HOST = "a.klaviyo.com"
HTTPS_PORT = 443
DEFAULT_USER_AGENT = f"klaviyo-client-core/{PACKAGE_VERSION}"

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# TIMEOUT CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class TimeoutConfig:
    """
    Конфигурация таймаутов.

    Args:
        connect: Таймаут подключения (сек)
        read: Таймаут чтения/записи и ожидания пула (сек)
        total: Общий лимит времени одного запроса (сек), None = только поэтапные

    Examples:
        >>> TimeoutConfig()
        >>> TimeoutConfig(connect=3, read=15, total=20)
    """
    connect: float = 10
    read: float = 30
    total: Optional[float] = 30

    def __post_init__(self):
        """Валидация."""
        if self.connect <= 0:
            raise ValueError("connect timeout must be positive")
        if self.read <= 0:
            raise ValueError("read timeout must be positive")
        if self.total is not None and self.total <= 0:
            raise ValueError("total timeout must be positive")

    def as_httpx(self) -> httpx.Timeout:
        """Вернуть как httpx.Timeout."""
        return httpx.Timeout(
            connect=self.connect,
            read=self.read,
            write=self.read,
            pool=self.read,
        )

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# MAIN CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class KlaviyoClientConfig:
    """
    Главная конфигурация клиента.

    Args:
        host: API хост (всегда HTTPS)
        port: HTTPS порт
        timeout: Конфигурация таймаутов
        user_agent: User-Agent по умолчанию (None = klaviyo-client-core/<version>)
        verify_ssl: Проверять SSL сертификаты
        headers: Дополнительные заголовки для каждого запроса
        logging: Конфигурация логирования (None = без логов)

    Examples:
        >>> config = KlaviyoClientConfig()
        >>> config = KlaviyoClientConfig.create(timeout=15)
    """
    host: str = DEFAULT_HOST
    port: int = HTTPS_PORT
    timeout: TimeoutConfig = field(default_factory=TimeoutConfig)
    user_agent: Optional[str] = None
    verify_ssl: bool = True
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    logging: Optional['LoggingConfig'] = None

    def __post_init__(self):
        """Freeze headers and validate host/port."""
        if isinstance(self.headers, dict):
            object.__setattr__(self, 'headers', MappingProxyType(dict(self.headers)))

        if not self.host:
            raise ValueError("host must not be empty")
        if "://" in self.host or "/" in self.host:
            raise ValueError("host must be a bare hostname, e.g. 'a.klaviyo.com'")
        if not 0 < self.port < 65536:
            raise ValueError("port must be in range 1..65535")

    @property
    def base_url(self) -> str:
        """https://<host>[:<port>] без завершающего слэша."""
        if self.port == HTTPS_PORT:
            return f"https://{self.host}"
        return f"https://{self.host}:{self.port}"

    @property
    def effective_user_agent(self) -> str:
        return self.user_agent or DEFAULT_USER_AGENT

    @classmethod
    def create(
        cls,
        timeout: Union[int, float, TimeoutConfig] = 30,
        connect_timeout: Optional[float] = None,
        host: str = DEFAULT_HOST,
        port: int = HTTPS_PORT,
        user_agent: Optional[str] = None,
        verify_ssl: bool = True,
        headers: Optional[Dict[str, str]] = None,
        logging: Optional['LoggingConfig'] = None,
    ) -> 'KlaviyoClientConfig':
        """
        Удобный конструктор конфигурации.

        Args:
            timeout: Таймаут (число = read и total, или TimeoutConfig)
            connect_timeout: Таймаут подключения (переопределяет значение по умолчанию)
            host: API хост
            port: HTTPS порт
            user_agent: User-Agent
            verify_ssl: Проверять SSL
            headers: Дополнительные заголовки
            logging: Конфигурация логирования

        Returns:
            KlaviyoClientConfig instance

        Examples:
            >>> config = KlaviyoClientConfig.create(timeout=15)
            >>> config = KlaviyoClientConfig.create(timeout=20, connect_timeout=3)
        """
        if isinstance(timeout, TimeoutConfig):
            timeout_cfg = timeout
        else:
            timeout_cfg = TimeoutConfig(
                connect=connect_timeout or min(10, timeout),
                read=timeout,
                total=timeout,
            )

        return cls(
            host=host,
            port=port,
            timeout=timeout_cfg,
            user_agent=user_agent,
            verify_ssl=verify_ssl,
            headers=headers or {},
            logging=logging,
        )

    def with_timeout(self, timeout: Union[int, float, TimeoutConfig]) -> 'KlaviyoClientConfig':
        """
        Создать новый конфиг с изменённым timeout.

        Example:
            >>> new_config = config.with_timeout(60)
        """
        if isinstance(timeout, TimeoutConfig):
            timeout_cfg = timeout
        else:
            timeout_cfg = TimeoutConfig(
                connect=min(self.timeout.connect, timeout),
                read=timeout,
                total=timeout,
            )
        return replace(self, timeout=timeout_cfg)

    def with_logging(self, logging: Optional['LoggingConfig']) -> 'KlaviyoClientConfig':
        """Создать новый конфиг с другой конфигурацией логирования."""
        return replace(self, logging=logging)

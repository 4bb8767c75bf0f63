"""
Pytest configuration and fixtures for klaviyo-client-core tests.
"""

import os

import pytest

from klaviyo_client.core.config import KlaviyoClientConfig
from klaviyo_client.core.logging.config import LoggingConfig
from klaviyo_client.core.transport import AsyncTransport

API_BASE = "https://a.klaviyo.com"


@pytest.fixture
def private_token():
    return "pk_test"


@pytest.fixture
def public_token():
    return "pub"


@pytest.fixture
def config():
    """Default client config (a.klaviyo.com:443)."""
    return KlaviyoClientConfig()


@pytest.fixture
def transport(config):
    """Transport without logging; httpx client is created lazily."""
    return AsyncTransport(config)


@pytest.fixture
def logging_config():
    """
    Logging config that propagates to the root logger so caplog sees records.

    Example:
        def test_logs(logging_config, caplog):
            config = KlaviyoClientConfig.create(logging=logging_config)
    """
    return LoggingConfig.create(level="DEBUG", enable_console=False)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every KLAVIYO_* variable so settings tests start from defaults."""
    for key in list(os.environ):
        if key.upper().startswith("KLAVIYO_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch

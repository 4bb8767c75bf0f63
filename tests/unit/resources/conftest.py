"""Fixtures for resource group tests: entry points replaced with mocks."""

from unittest.mock import Mock

import pytest

from klaviyo_client.core.api import PrivateApi, PublicApi


@pytest.fixture
def private_api():
    # Plain Mock: resource methods return the entry point's awaitable as is
    api = Mock(spec=PrivateApi)
    api.v1_call = Mock(return_value="v1-awaitable")
    api.v2_call = Mock(return_value="v2-awaitable")
    return api


@pytest.fixture
def public_api():
    api = Mock(spec=PublicApi)
    api.public_call = Mock(return_value="public-awaitable")
    return api

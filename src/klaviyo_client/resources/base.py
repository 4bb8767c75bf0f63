"""Shared plumbing for resource groups."""

from typing import Any, Optional, Sequence

from ..core.api import PrivateApi, PublicApi
from ..core.exceptions import ConfigurationError

API_DESC = "desc"
API_ASC = "asc"


def require(value: Any, message: str) -> Any:
    """Raise ConfigurationError(message) when ``value`` is empty."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ConfigurationError(message)
    return value


def as_list(values: Optional[Sequence[Any]]) -> list:
    return list(values) if values else []


class PrivateResource:
    """Base for groups that call the private (v1/v2) API."""

    def __init__(self, api: PrivateApi):
        self._api = api

    @property
    def api(self) -> PrivateApi:
        return self._api

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._api!r})"


class PublicResource:
    """Base for groups that call the public tracking API."""

    def __init__(self, api: PublicApi):
        self._api = api

    @property
    def api(self) -> PublicApi:
        return self._api

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._api!r})"

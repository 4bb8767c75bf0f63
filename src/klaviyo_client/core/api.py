"""
Entry points shared by the resource groups.

``PrivateApi`` carries the private token and serves the v1 (form) and
v2 (JSON) conventions. ``PublicApi`` carries the public token and serves
the base64 tracking convention.
"""

from typing import Any, Awaitable, Mapping, Optional, Union

from ..utils.sanitizer import mask_secret
from .exceptions import ConfigurationError
from .request import (
    HTTPMethod,
    build_public_request,
    build_v1_request,
    build_v2_request,
)
from .transport import AsyncTransport


def _require_token(token: Optional[str], kind: str) -> str:
    if not token or not str(token).strip():
        raise ConfigurationError(f"{kind} token was not provided.")
    return token


class PrivateApi:
    """
    Private-key calls (``api_key`` injected into every request).

    Example:
        >>> api = PrivateApi("pk_...", transport)
        >>> await api.v1_call("person/01ABC")
        >>> await api.v2_call("lists", "POST", {"list_name": "VIP"})
    """

    def __init__(self, token: str, transport: AsyncTransport):
        self._token = _require_token(token, "Private")
        self._transport = transport

    @property
    def token(self) -> str:
        return self._token

    @property
    def transport(self) -> AsyncTransport:
        return self._transport

    def v1_call(
        self,
        resource: str,
        method: Union[str, HTTPMethod] = HTTPMethod.GET,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Awaitable[Any]:
        """Form-encoded call to ``/api/v1/<resource>``. Returns the decoded JSON."""
        spec = build_v1_request(resource, method, params, self._token)
        return self._transport.perform(spec)

    def v2_call(
        self,
        resource: str,
        method: Union[str, HTTPMethod] = HTTPMethod.GET,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Awaitable[Any]:
        """JSON call to ``/api/v2/<resource>``. Returns the decoded JSON."""
        spec = build_v2_request(resource, method, params, self._token)
        return self._transport.perform(spec)

    def __repr__(self) -> str:
        return f"PrivateApi(token={mask_secret(self._token)!r})"


class PublicApi:
    """
    Public-token tracking calls. Always GET, response is 1 (accepted) or 0.
    """

    def __init__(self, token: str, transport: AsyncTransport):
        self._token = _require_token(token, "Public")
        self._transport = transport

    @property
    def token(self) -> str:
        return self._token

    @property
    def transport(self) -> AsyncTransport:
        return self._transport

    def public_call(
        self,
        resource: str,
        data: Optional[Mapping[str, Any]] = None,
        is_test: bool = False,
    ) -> Awaitable[int]:
        spec = build_public_request(resource, data, self._token, is_test)
        return self._transport.perform(spec)

    def __repr__(self) -> str:
        return f"PublicApi(token={mask_secret(self._token)!r})"

"""Request specs and per-convention request builders."""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from ..utils.encoding import (
    content_length,
    encode_form,
    encode_json,
    encode_public_query,
)
from ..utils.sanitizer import clean_params
from .exceptions import ConfigurationError

API_ROOT = "api"
V1_API = "v1"
V2_API = "v2"

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
JSON_CONTENT_TYPE = "application/json"


class HTTPMethod(str, Enum):
    """HTTP methods used by the Klaviyo API."""
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def parse(cls, method: Union[str, "HTTPMethod"]) -> "HTTPMethod":
        """Normalize a method name, raising ConfigurationError for unsupported ones."""
        if isinstance(method, cls):
            return method
        try:
            return cls(str(method).upper())
        except ValueError:
            raise ConfigurationError(
                f"Unsupported HTTP method: {method!r}. "
                f"Use one of: {', '.join(m.value for m in cls)}"
            ) from None


class ResponseFormat(str, Enum):
    """How a successful response body is decoded."""
    JSON = "json"
    PASS_FAIL = "pass_fail"  # bare "1" / "0"


@dataclass(frozen=True)
class RequestSpec:
    """
    A transport-ready request.

    Built per call by one of the ``build_*_request`` functions and discarded
    once the call completes.

    Attributes:
        path: Path including the query string, e.g. ``/api/v1/person/abc?api_key=...``
        method: HTTP method
        headers: Request headers (frozen)
        body: Encoded body or None
        response_format: Decoding rule for a successful response
        request_id: Unique id of this request, used in logs
    """

    path: str
    method: HTTPMethod = HTTPMethod.GET
    headers: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    body: Optional[str] = None
    response_format: ResponseFormat = ResponseFormat.JSON
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        object.__setattr__(self, 'method', HTTPMethod.parse(self.method))
        object.__setattr__(self, 'response_format', ResponseFormat(self.response_format))
        if isinstance(self.headers, dict):
            object.__setattr__(self, 'headers', MappingProxyType(dict(self.headers)))


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# CREDENTIAL INJECTION
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def inject_api_key(params: Mapping[str, Any], token: str) -> Dict[str, Any]:
    """Return a copy of ``params`` with the private token under ``api_key``."""
    data = dict(params)
    data["api_key"] = token
    return data


def inject_public_token(data: Mapping[str, Any], token: str) -> Dict[str, Any]:
    """Return a copy of the public tracking data with ``token`` set."""
    result = dict(data)
    result["token"] = token
    return result


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BUILDERS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def _resource_path(*parts: str) -> str:
    segments = [API_ROOT, *parts]
    return "/" + "/".join(segment.strip("/") for segment in segments)


def _require_resource(resource: str) -> str:
    if not resource or not str(resource).strip("/"):
        raise ConfigurationError("API resource was not provided.")
    return str(resource)


def build_v1_request(
    resource: str,
    method: Union[str, HTTPMethod],
    params: Optional[Mapping[str, Any]],
    token: str,
) -> RequestSpec:
    """
    Build a form-encoded v1 request.

    GET sends the form as the query string, every other method sends it
    as the body.

    Example:
        >>> spec = build_v1_request("person/qwerty", "GET", {}, "pk_test")
        >>> spec.path
        '/api/v1/person/qwerty?api_key=pk_test'
    """
    http_method = HTTPMethod.parse(method)
    form = encode_form(clean_params(inject_api_key(params or {}, token)))
    path = _resource_path(V1_API, _require_resource(resource))
    headers = {"Content-Type": FORM_CONTENT_TYPE}

    if http_method is HTTPMethod.GET:
        if form:
            path = f"{path}?{form}"
        return RequestSpec(path=path, method=http_method, headers=headers)

    return RequestSpec(path=path, method=http_method, headers=headers, body=form)


def build_v2_request(
    resource: str,
    method: Union[str, HTTPMethod],
    params: Optional[Mapping[str, Any]],
    token: str,
) -> RequestSpec:
    """
    Build a JSON v2 request. The JSON body is sent for every method.

    Example:
        >>> spec = build_v2_request("lists", "POST", {"list_name": "VIP"}, "pk_test")
        >>> spec.body
        '{"list_name":"VIP","api_key":"pk_test"}'
    """
    http_method = HTTPMethod.parse(method)
    body = encode_json(clean_params(inject_api_key(params or {}, token)))
    headers = {
        "Content-Type": JSON_CONTENT_TYPE,
        "Content-Length": str(content_length(body)),
    }
    return RequestSpec(
        path=_resource_path(V2_API, _require_resource(resource)),
        method=http_method,
        headers=headers,
        body=body,
    )


def build_public_request(
    resource: str,
    data: Optional[Mapping[str, Any]],
    token: str,
    is_test: bool = False,
) -> RequestSpec:
    """
    Build a public tracking request (always GET).

    Example:
        >>> spec = build_public_request("track", {"event": "Test"}, "pub", is_test=True)
        >>> spec.path.startswith('/api/track?data=')
        True
    """
    query = encode_public_query(clean_params(inject_public_token(data or {}, token)), is_test)
    return RequestSpec(
        path=f"{_resource_path(_require_resource(resource))}?{query}",
        method=HTTPMethod.GET,
        response_format=ResponseFormat.PASS_FAIL,
    )

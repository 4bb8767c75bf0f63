"""
Encoders for the three Klaviyo request conventions.

- v1: application/x-www-form-urlencoded (query string or body)
- v2: compact JSON body
- public tracking: base64(JSON) under ``data`` plus a ``test`` flag, as a query string

All encoders are deterministic for a given input mapping and preserve key order.
"""

import base64
import json
from typing import Any, Dict, Mapping, Tuple
from urllib.parse import parse_qs, urlencode


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list, tuple)):
        return encode_json(value)
    return str(value)


def encode_form(params: Mapping[str, Any]) -> str:
    """
    Encode a flat mapping as ``application/x-www-form-urlencoded``.

    Booleans are rendered as ``true``/``false`` and nested containers as
    compact JSON text.

    Example:
        >>> encode_form({"since": 1604078804, "sort": "desc", "flag": True})
        'since=1604078804&sort=desc&flag=true'
    """
    return urlencode([(key, _form_value(value)) for key, value in params.items()])


def encode_json(data: Any) -> str:
    """
    Serialize to compact JSON, keeping non-ASCII characters as-is.

    Example:
        >>> encode_json({"list_name": "VIP", "api_key": "pk_test"})
        '{"list_name":"VIP","api_key":"pk_test"}'
    """
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def content_length(body: str) -> int:
    """Byte length of ``body`` once encoded as UTF-8."""
    return len(body.encode("utf-8"))


def encode_public_query(data: Mapping[str, Any], is_test: bool = False) -> str:
    """
    Build the public tracking query string.

    The data mapping is JSON-encoded, base64-encoded and placed under
    ``data`` next to ``test`` (1 for test events, else 0).

    Example:
        >>> encode_public_query({"token": "pub", "event": "Test"}, is_test=True)
        'data=eyJ0b2tlbiI6InB1YiIsImV2ZW50IjoiVGVzdCJ9&test=1'
    """
    encoded = base64.b64encode(encode_json(data).encode("utf-8")).decode("ascii")
    return urlencode({"data": encoded, "test": 1 if is_test else 0})


def decode_public_query(query: str) -> Tuple[Dict[str, Any], bool]:
    """
    Inverse of :func:`encode_public_query`.

    Args:
        query: Query string, with or without a leading ``?``

    Returns:
        (data mapping, is_test flag)

    Raises:
        ValueError: If the ``data`` field is missing
    """
    fields = parse_qs(query.lstrip("?"), keep_blank_values=True)
    if "data" not in fields:
        raise ValueError("query has no 'data' field")

    raw = base64.b64decode(fields["data"][0])
    data = json.loads(raw.decode("utf-8"))
    is_test = fields.get("test", ["0"])[0] == "1"
    return data, is_test

# src/klaviyo_client/utils/sanitizer.py
"""
Очистка параметров запроса и маскирование секретов.

- clean_params: убирает ключи со значением None перед кодированием
- mask_*: не даёт api_key / token попасть в логи, сообщения ошибок и repr
"""

import re
from typing import Any, Dict, Mapping


# Чувствительные поля (case-insensitive, частичное совпадение)
SENSITIVE_KEYS = {
    'api_key', 'apikey', 'token', 'private_token', 'public_token',
    'authorization', 'secret', 'password', 'cookie',
}

# Query параметры, которые маскируются в URL.
# data - base64(JSON) public tracking запроса, внутри него лежит token.
SENSITIVE_QUERY_PARAMS = SENSITIVE_KEYS | {'data'}

SENSITIVE_PATTERNS = [
    (re.compile(r'(Bearer\s+)([A-Za-z0-9\-._~+/]+=*)', re.IGNORECASE), r'\1***REDACTED***'),
    (re.compile(r'(api[_-]?key[\s:=]+)([^\s&,;]+)', re.IGNORECASE), r'\1***REDACTED***'),
    (re.compile(r'(token[\s:=]+)([^\s&,;]+)', re.IGNORECASE), r'\1***REDACTED***'),
]

REDACTED = "***REDACTED***"


def clean_params(params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Удаляет ключи со значением None.

    Пустая строка, 0 и False - валидные значения и остаются.

    Args:
        params: Плоский словарь параметров

    Returns:
        Новый словарь без None значений

    Examples:
        >>> clean_params({"since": None, "count": 0, "sort": "", "flag": False})
        {'count': 0, 'sort': '', 'flag': False}
    """
    return {key: value for key, value in params.items() if value is not None}


def mask_sensitive_data(data: Any, mask: str = REDACTED) -> Any:
    """
    Рекурсивно маскирует чувствительные данные в словарях, списках, строках.

    Examples:
        >>> mask_sensitive_data({"api_key": "pk_123", "count": 100})
        {'api_key': '***REDACTED***', 'count': 100}
    """
    if data is None or isinstance(data, (bool, int, float)):
        return data

    if isinstance(data, str):
        return _mask_string(data, mask)

    if isinstance(data, Mapping):
        return _mask_dict(data, mask)

    if isinstance(data, (list, tuple)):
        return type(data)(mask_sensitive_data(item, mask) for item in data)

    return data


def _mask_dict(data: Mapping[str, Any], mask: str) -> Dict[str, Any]:
    result = {}
    for key, value in data.items():
        key_lower = key.lower() if isinstance(key, str) else str(key).lower()
        if _is_sensitive_key(key_lower):
            result[key] = mask
        else:
            result[key] = mask_sensitive_data(value, mask)
    return result


def _mask_string(text: str, mask: str) -> str:
    result = text
    for pattern, replacement in SENSITIVE_PATTERNS:
        result = pattern.sub(replacement.replace(REDACTED, mask), result)
    return result


def _is_sensitive_key(key: str) -> bool:
    if key in SENSITIVE_KEYS:
        return True
    return any(sensitive_key in key for sensitive_key in SENSITIVE_KEYS)


def mask_url(url: str, mask: str = REDACTED) -> str:
    """
    Маскирует чувствительные query параметры в URL или пути.

    Examples:
        >>> mask_url("/api/v1/person/abc?api_key=pk_123&count=5")
        '/api/v1/person/abc?api_key=***REDACTED***&count=5'

        >>> mask_url("/api/track?data=eyJ0b2tlbiI6...&test=0")
        '/api/track?data=***REDACTED***&test=0'
    """
    for sensitive_key in SENSITIVE_QUERY_PARAMS:
        pattern = re.compile(rf'([?&]{re.escape(sensitive_key)}=)([^&\s#]+)', re.IGNORECASE)
        url = pattern.sub(lambda match: match.group(1) + mask, url)
    return url


def mask_headers(headers: Mapping[str, str], mask: str = REDACTED) -> Dict[str, str]:
    """
    Маскирует чувствительные HTTP заголовки.

    Examples:
        >>> mask_headers({"Authorization": "Bearer abc", "User-Agent": "x"})
        {'Authorization': '***REDACTED***', 'User-Agent': 'x'}
    """
    return _mask_dict(headers, mask)


def mask_secret(value: str, visible_chars: int = 4) -> str:
    """
    Маскирует секрет для repr, оставляя края.

    Examples:
        >>> mask_secret("pk_abcdef1234567890")
        'pk_a***7890'
        >>> mask_secret("short")
        '***'
    """
    if not value:
        return ""

    if len(value) <= visible_chars * 2:
        return "***"

    return f"{value[:visible_chars]}***{value[-visible_chars:]}"

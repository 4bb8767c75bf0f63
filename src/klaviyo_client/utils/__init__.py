"""Utility modules for Klaviyo client."""

from .encoding import (
    encode_form,
    encode_json,
    encode_public_query,
    decode_public_query,
    content_length,
)
from .sanitizer import (
    clean_params,
    mask_sensitive_data,
    mask_url,
    mask_headers,
    mask_secret,
)

__all__ = [
    'encode_form',
    'encode_json',
    'encode_public_query',
    'decode_public_query',
    'content_length',
    'clean_params',
    'mask_sensitive_data',
    'mask_url',
    'mask_headers',
    'mask_secret',
]

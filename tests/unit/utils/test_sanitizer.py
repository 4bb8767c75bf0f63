"""
Tests for parameter cleaning and secret masking.
"""

from hypothesis import given
from hypothesis import strategies as st

from klaviyo_client.utils.sanitizer import (
    REDACTED,
    clean_params,
    mask_headers,
    mask_secret,
    mask_sensitive_data,
    mask_url,
)


class TestCleanParams:
    """clean_params drops exactly the None values."""

    def test_removes_none_values(self):
        assert clean_params({"since": None, "count": 100}) == {"count": 100}

    def test_keeps_falsy_values(self):
        params = {"sort": "", "count": 0, "flag": False, "items": []}
        assert clean_params(params) == params

    def test_preserves_key_order(self):
        result = clean_params({"b": 1, "a": None, "c": 2})
        assert list(result) == ["b", "c"]

    def test_returns_new_dict(self):
        params = {"a": 1, "b": None}
        result = clean_params(params)
        assert result is not params
        assert params == {"a": 1, "b": None}

    def test_empty(self):
        assert clean_params({}) == {}

    def test_shallow(self):
        nested = {"properties": {"email": None}}
        assert clean_params(nested) == nested


class TestMaskSensitiveData:

    def test_masks_api_key(self):
        result = mask_sensitive_data({"api_key": "pk_123", "count": 100})
        assert result == {"api_key": REDACTED, "count": 100}

    def test_masks_partial_key_match(self):
        result = mask_sensitive_data({"private_token": "pk_1", "x_public_token": "abc"})
        assert result["private_token"] == REDACTED
        assert result["x_public_token"] == REDACTED

    def test_masks_nested(self):
        result = mask_sensitive_data({"request": {"params": {"token": "pub"}}})
        assert result["request"]["params"]["token"] == REDACTED

    def test_masks_strings(self):
        result = mask_sensitive_data("GET /api/v1/metrics?api_key=pk_secret&count=5")
        assert "pk_secret" not in result
        assert "count=5" in result

    def test_masks_bearer(self):
        assert "abc.def" not in mask_sensitive_data("Authorization: Bearer abc.def")

    def test_passes_through_scalars(self):
        assert mask_sensitive_data(42) == 42
        assert mask_sensitive_data(None) is None
        assert mask_sensitive_data(True) is True

    def test_lists(self):
        result = mask_sensitive_data([{"token": "x"}, "plain"])
        assert result == [{"token": REDACTED}, "plain"]


class TestMaskUrl:

    def test_masks_api_key_param(self):
        url = "https://a.klaviyo.com/api/v1/person/abc?api_key=pk_123&count=5"
        assert mask_url(url) == f"https://a.klaviyo.com/api/v1/person/abc?api_key={REDACTED}&count=5"

    def test_masks_public_data_param(self):
        url = "/api/track?data=eyJ0b2tlbiI6InB1YiJ9&test=0"
        assert mask_url(url) == f"/api/track?data={REDACTED}&test=0"

    def test_leaves_other_params(self):
        url = "/api/v1/metrics?page=0&count=50"
        assert mask_url(url) == url

    def test_not_first_param(self):
        masked = mask_url("/api/v1/metrics?page=0&api_key=pk_123")
        assert "pk_123" not in masked
        assert masked.startswith("/api/v1/metrics?page=0&api_key=")


class TestMaskHeaders:

    def test_masks_authorization(self):
        result = mask_headers({"Authorization": "Bearer abc", "User-Agent": "x"})
        assert result == {"Authorization": REDACTED, "User-Agent": "x"}


class TestMaskSecret:

    def test_long_secret_keeps_edges(self):
        assert mask_secret("pk_abcdef1234567890") == "pk_a***7890"

    def test_short_secret_fully_masked(self):
        assert mask_secret("pub") == "***"
        assert mask_secret("12345678") == "***"

    def test_empty(self):
        assert mask_secret("") == ""

    def test_custom_visible_chars(self):
        assert mask_secret("pk_abcdef1234567890", visible_chars=2) == "pk***90"


class TestCleanParamsProperties:

    @given(st.dictionaries(st.text(), st.none() | st.booleans() | st.integers() | st.text()))
    def test_removes_exactly_none_values(self, params):
        result = clean_params(params)
        assert result == {key: value for key, value in params.items() if value is not None}
        assert None not in result.values()

"""
Tests for JSONFormatter, TextFormatter and get_formatter.
"""

import json
import logging
import sys

import pytest

from klaviyo_client.core.logging.formatters import JSONFormatter, TextFormatter, get_formatter


def make_record(msg="Request completed", **extra):
    record = logging.LogRecord(
        name="klaviyo_client.transport",
        level=logging.INFO,
        pathname="transport.py",
        lineno=10,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:

    def test_basic_format(self):
        data = json.loads(JSONFormatter().format(make_record()))

        assert data["level"] == "INFO"
        assert data["logger"] == "klaviyo_client.transport"
        assert data["message"] == "Request completed"
        assert data["timestamp"].endswith("Z")

    def test_extra_fields(self):
        data = json.loads(JSONFormatter().format(make_record(status_code=200, elapsed_ms=12.5)))
        assert data["status_code"] == 200
        assert data["elapsed_ms"] == 12.5

    def test_standard_fields_skipped(self):
        data = json.loads(JSONFormatter().format(make_record()))
        assert "lineno" not in data
        assert "pathname" not in data

    def test_non_serializable_extra(self):
        data = json.loads(JSONFormatter().format(make_record(obj=object())))
        assert data["obj"].startswith("<object object")

    def test_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record()
            record.exc_info = sys.exc_info()

        data = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in data["exception"]


class TestTextFormatter:

    def test_format(self):
        output = TextFormatter().format(make_record(method="GET", status_code=200))
        assert "[INFO]" in output
        assert "[klaviyo_client.transport]" in output
        assert "Request completed" in output
        assert "method=GET" in output
        assert "status_code=200" in output

    def test_no_extra(self):
        output = TextFormatter().format(make_record())
        assert output.endswith("Request completed")


class TestGetFormatter:

    def test_known(self):
        assert isinstance(get_formatter("json"), JSONFormatter)
        assert isinstance(get_formatter("TEXT"), TextFormatter)

    def test_unknown(self):
        with pytest.raises(ValueError, match="Unknown format type"):
            get_formatter("xml")

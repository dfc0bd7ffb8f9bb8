"""
Tests for Etherpad MCP utility functions.
"""
import pytest

from etherpad_mcp.utils import (
    format_timestamp,
    format_timestamp_ms,
    to_unix_millis,
    to_unix_timestamp,
)


class TestToUnixTimestamp:
    def test_int(self):
        assert to_unix_timestamp(1767225600) == 1767225600

    def test_float_truncated(self):
        assert to_unix_timestamp(1767225600.9) == 1767225600

    def test_numeric_string(self):
        assert to_unix_timestamp(" 1767225600 ") == 1767225600

    def test_date(self):
        assert to_unix_timestamp("2026-01-01") == 1767225600

    def test_naive_datetime_is_utc(self):
        assert to_unix_timestamp("2026-01-01T00:01:00") == 1767225660

    def test_datetime_with_offset(self):
        assert to_unix_timestamp("2026-01-01T02:00:00+02:00") == 1767225600

    def test_invalid(self):
        with pytest.raises(ValueError, match="Invalid timestamp"):
            to_unix_timestamp("tomorrow")

    def test_bool_rejected(self):
        with pytest.raises(ValueError):
            to_unix_timestamp(True)


class TestToUnixMillis:
    def test_int_taken_as_millis(self):
        assert to_unix_millis(1767225600123) == 1767225600123

    def test_numeric_string(self):
        assert to_unix_millis("1767225600123") == 1767225600123

    def test_date(self):
        assert to_unix_millis("2026-01-01") == 1767225600000

    def test_datetime_keeps_milliseconds(self):
        assert to_unix_millis("2026-01-01T00:00:00.250+00:00") == 1767225600250

    def test_invalid(self):
        with pytest.raises(ValueError, match="unix milliseconds"):
            to_unix_millis("tomorrow")

    def test_bool_rejected(self):
        with pytest.raises(ValueError):
            to_unix_millis(False)


class TestFormatTimestamp:
    def test_seconds(self):
        assert format_timestamp(1767225600) == "2026-01-01T00:00:00+00:00"

    def test_none(self):
        assert format_timestamp(None) is None

    def test_not_a_number(self):
        assert format_timestamp("soon") is None

    def test_milliseconds(self):
        assert format_timestamp_ms(1767225600000) == "2026-01-01T00:00:00+00:00"

    def test_milliseconds_none(self):
        assert format_timestamp_ms(None) is None

    def test_milliseconds_not_a_number(self):
        assert format_timestamp_ms("soon") is None

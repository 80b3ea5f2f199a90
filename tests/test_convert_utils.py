"""
Tests for display conversion utilities used in summaries and interactive prompts.
"""
import time

from remove_duplicates.utils.convert_utils import ConvertUtils


class TestBytesToHuman:
    """Test conversion from byte counts to human-readable sizes."""

    def test_small_values_stay_in_bytes(self):
        assert ConvertUtils.bytes_to_human(0) == "0.00B"
        assert ConvertUtils.bytes_to_human(1023) == "1023.00B"

    def test_binary_units(self):
        """Units step by 1024, not 1000."""
        assert ConvertUtils.bytes_to_human(1024) == "1.00KB"
        assert ConvertUtils.bytes_to_human(1536) == "1.50KB"
        assert ConvertUtils.bytes_to_human(1024 * 1024) == "1.00MB"
        assert ConvertUtils.bytes_to_human(5 * 1024 ** 3) == "5.00GB"

    def test_negative_is_clamped(self):
        assert ConvertUtils.bytes_to_human(-10) == "0B"


class TestTimestampToHuman:
    """Test modification time rendering for the interactive prompt."""

    def test_default_format(self):
        ts = 1_000_000
        expected = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime(ts))
        assert ConvertUtils.timestamp_to_human(ts) == expected

    def test_custom_format(self):
        ts = 1_000_000
        assert ConvertUtils.timestamp_to_human(ts, "%Y") == time.strftime("%Y", time.localtime(ts))

    def test_out_of_range_timestamp(self):
        """Unrepresentable timestamps must not raise."""
        assert ConvertUtils.timestamp_to_human(1e20) == "Invalid timestamp"

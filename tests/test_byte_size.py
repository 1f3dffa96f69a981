"""Unit tests for the Bytes value type.

Tests cover:
- Text and JSON marshalling with unit selection
- Parsing of every unit suffix
- Rejection of malformed input
- Exact round trips for whole multiples of a unit
"""

import pytest

from marshalkit.core.exceptions import InvalidFormatError
from marshalkit.values.byte_size import MAX_BYTES, Bytes, format_bytes, parse_bytes

KB = 1024
MB = 1024 * KB
GB = 1024 * MB
TB = 1024 * GB
PB = 1024 * TB
EB = 1024 * PB

CASES = [
    (1, "1B"),
    (1000, "1000B"),
    (KB, "1.0kB"),
    (MB, "1.0MB"),
    (GB, "1.0GB"),
    (TB, "1.0TB"),
    (PB, "1.0PB"),
    (EB, "1.0EB"),
    (12 * KB, "12kB"),
    (99 * KB, "99kB"),
    (250 * KB, "250kB"),
    (1000 * MB, "1000MB"),
]


class TestBytesMarshal:
    """Tests for rendering byte counts."""

    @pytest.mark.parametrize("value,want", CASES)
    def test_marshal_text(self, value, want):
        assert Bytes(value).marshal_text() == want

    @pytest.mark.parametrize("value,want", CASES)
    def test_marshal_json(self, value, want):
        assert Bytes(value).marshal_json() == f'"{want}"'

    def test_zero(self):
        assert format_bytes(0) == "0B"

    def test_fraction_is_kept_below_ten_units(self):
        assert format_bytes(1536) == "1.5kB"

    def test_unit_is_not_promoted(self):
        """1000MB stays in MB even though it is close to a GB."""
        assert format_bytes(1023 * MB) == "1023MB"

    def test_largest_value(self):
        assert format_bytes(MAX_BYTES) == "16EB"

    @pytest.mark.parametrize("value", [MAX_BYTES, 16 * EB - PB // 10])
    def test_largest_values_read_back(self, value):
        """Counts that round up to 16EB still parse, clamped to the maximum."""
        b = Bytes.unmarshal_text(Bytes(value).marshal_text())
        assert b == MAX_BYTES


class TestBytesUnmarshal:
    """Tests for parsing byte counts."""

    @pytest.mark.parametrize("value,text", CASES)
    def test_unmarshal_text(self, value, text):
        assert Bytes.unmarshal_text(text) == value

    @pytest.mark.parametrize("value,text", CASES)
    def test_unmarshal_json(self, value, text):
        b = Bytes.unmarshal_json(f'"{text}"')
        assert isinstance(b, Bytes)
        assert b == value

    def test_unmarshal_text_accepts_bytes_input(self):
        assert Bytes.unmarshal_text(b"250kB") == 250 * KB

    def test_parse_rounds_to_nearest_byte(self):
        assert parse_bytes("1.5kB") == 1536
        assert parse_bytes("0.0005kB") == 1

    def test_parse_ignores_surrounding_whitespace(self):
        assert parse_bytes(" 2MB ") == 2 * MB

    @pytest.mark.parametrize(
        "text",
        ["", "1024", "kB", "1KB", "1 kB", "-1kB", "1.2.3kB", "abc", "1kb", "17EB", "16.1EB"],
    )
    def test_unmarshal_text_error(self, text):
        with pytest.raises(InvalidFormatError):
            Bytes.unmarshal_text(text)

    @pytest.mark.parametrize("data", ["1024", '""', "null", "true", "", '"1kB'])
    def test_unmarshal_json_error(self, data):
        with pytest.raises(InvalidFormatError):
            Bytes.unmarshal_json(data)


class TestBytesValue:
    """Tests for construction and accessors."""

    @pytest.mark.parametrize("value", [1, 1024])
    def test_bytes_accessor(self, value):
        assert Bytes(value).bytes() == value

    @pytest.mark.parametrize("value", [-1, MAX_BYTES + 1])
    def test_out_of_range(self, value):
        with pytest.raises(InvalidFormatError):
            Bytes(value)

    def test_repr(self):
        assert repr(Bytes(2048)) == "Bytes(2048)"

    def test_is_int(self):
        assert Bytes(3) + 1 == 4


@pytest.mark.parametrize("power", range(7))
@pytest.mark.parametrize("multiple", [1, 7, 15])
def test_whole_units_round_trip(power, multiple):
    value = multiple * 1024**power
    assert parse_bytes(format_bytes(value)) == value


def test_display_rounding_is_lossy():
    assert format_bytes(1500) == "1.5kB"
    assert parse_bytes(format_bytes(1500)) == 1536

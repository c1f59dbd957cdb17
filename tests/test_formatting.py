# tests/test_formatting.py
import pytest
from ethscope.explorer.formatting import format_value, calculate_fee, truncate

class TestFormatValue:
    def test_fixed_places(self):
        assert format_value(1_500_000_000_000_000_000, 12) == "1.500000000000"
        assert format_value(1, 12) == "0.000000000000"
        assert format_value(0, 12) == "0.000000000000"

    def test_default_places_is_shortest_decimal(self):
        assert format_value(1_500_000_000_000_000_000) == "1.5"
        assert format_value(10 ** 19) == "10"
        assert format_value(1) == "0.000000000000000001"

    def test_absent_or_zero_value(self):
        assert format_value(None) == "0"
        assert format_value(0) == "0"
        assert format_value(None, 12) == "0"

    def test_non_numeric_value(self):
        assert format_value("not a number") == "0"
        assert format_value(1.5, 4) == "0"

    @pytest.mark.parametrize("value", [-1, "-5", 2 ** 256])
    def test_out_of_range_value(self, value):
        assert format_value(value, 12) == "0"
        assert format_value(value) == "0"

    def test_largest_value(self):
        assert format_value(2 ** 256 - 1) != "0"

    def test_numeric_strings(self):
        assert format_value("1000000000000000000", 2) == "1.00"
        assert format_value("0xde0b6b3a7640000", 2) == "1.00"

    def test_same_input_same_output(self):
        first = format_value(123_456_789_012_345_678, 12)
        assert first == format_value(123_456_789_012_345_678, 12)
        assert first == "0.123456789012"

class TestCalculateFee:
    def test_fee_is_gas_limit_times_gas_price(self):
        # 21000 * 30 gwei = 0.00063 ether
        assert calculate_fee(21000, 30_000_000_000, 5) == "0.00063"
        assert calculate_fee(21000, 5_000_000_000, 18) == "0.000105000000000000"

    @pytest.mark.parametrize("gas_limit,gas_price", [
        (None, 5_000_000_000),
        (21000, None),
        (None, None),
        ("abc", 5_000_000_000),
        (21000, object()),
    ])
    @pytest.mark.parametrize("places", [0, 5, 18])
    def test_missing_operand_returns_zero(self, gas_limit, gas_price, places):
        assert calculate_fee(gas_limit, gas_price, places) == "0"

    def test_zero_fee_keeps_places(self):
        assert calculate_fee(0, 5_000_000_000, 5) == "0.00000"

    @pytest.mark.parametrize("gas_limit,gas_price", [
        (-21000, 5_000_000_000),
        (21000, "-5"),
        (-1, -1),
        (2 ** 200, 2 ** 100),
        (2 ** 256, 1),
    ])
    def test_out_of_range_returns_zero(self, gas_limit, gas_price):
        assert calculate_fee(gas_limit, gas_price, 5) == "0"

class TestTruncate:
    def test_truncates_with_ellipsis(self):
        text = "0x5c504ed432cb51138bcf09aa5e8a410dd4a1e204ef84bfed1be16dfba1b22060"
        result = truncate(text, 10)
        assert result == "0x5c504ed4..."
        assert len(result) == 13

    def test_short_text_keeps_whole_text(self):
        assert truncate("0x", 15) == "0x..."
        assert truncate("", 15) == "..."

    @pytest.mark.parametrize("value", [None, 42, b"0x00"])
    def test_non_string_returns_empty(self, value):
        assert truncate(value, 10) == ""

    @pytest.mark.parametrize("length", [2.5, "10", None, True])
    def test_non_integer_length_returns_empty(self, length):
        assert truncate("0xabcdef", length) == ""

    def test_negative_length_keeps_no_characters(self):
        assert truncate("abcdef", -1) == "..."
        assert truncate("abcdef", 0) == "..."

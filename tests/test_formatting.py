import pytest

from wallet.formatting import (
    address_url,
    day_name,
    format_date_only,
    format_ether,
    format_units,
    parse_ether,
    truncate_address,
    tx_url,
)


class TestFormatUnits:

    def test_one_ether(self):
        assert format_ether("1000000000000000000") == "1.0000"

    def test_zero(self):
        assert format_ether(0) == "0.0000"

    def test_rounds_to_four_places(self):
        assert format_ether("123456789012345678") == "0.1235"

    def test_custom_decimals(self):
        assert format_units(2_500_000, decimals=6) == "2.5000"

    def test_huge_value_keeps_precision(self):
        value = 2 ** 256 - 1
        formatted = format_ether(value)
        assert formatted.startswith(str(value // 10 ** 18))
        assert formatted.endswith(".5840")

    def test_malformed_value_formats_as_zero(self):
        assert format_ether("garbage") == "0.0000"


class TestParseEther:

    @pytest.mark.parametrize("amount, expected", [
        ("1", 10 ** 18),
        ("0.5", 5 * 10 ** 17),
        (" 2.25 ", 225 * 10 ** 16),
        ("0", 0),
        ("0.0000000000000000001", 0),
    ])
    def test_converts_to_wei(self, amount, expected):
        assert parse_ether(amount) == expected

    @pytest.mark.parametrize("amount", [None, "", "abc", "-1", "NaN", "1.2.3", 5])
    def test_malformed_is_none(self, amount):
        assert parse_ether(amount) is None

    @pytest.mark.parametrize("amount", ["Infinity", "-Infinity", "sNaN"])
    def test_non_finite_is_none(self, amount):
        assert parse_ether(amount) is None

    def test_amount_beyond_uint256_wei_is_kept_exact(self):
        assert parse_ether("1e100") == 10 ** 118
        assert parse_ether("123456789012345678901234567890123456789012345678901234567890") == (
            123456789012345678901234567890123456789012345678901234567890 * 10 ** 18
        )
        assert parse_ether("1e100") > 2 ** 256


class TestDisplayHelpers:

    def test_truncate_address(self):
        address = "0x1234567890abcdef1234567890abcdef12345678"
        assert truncate_address(address) == "0x1234...5678"

    def test_truncate_short_string_untouched(self):
        assert truncate_address("0x12") == "0x12"

    def test_format_date_only_utc(self):
        assert format_date_only(1705276800) == "January 15, 2024"
        assert format_date_only("1705363199") == "January 15, 2024"

    def test_format_date_only_unparseable(self):
        assert format_date_only("yesterday") == ""

    def test_day_name(self):
        assert day_name(0) == "Sunday"
        assert day_name(6) == "Saturday"
        assert day_name(7) == "Unknown"

    def test_explorer_urls(self):
        assert tx_url("0xabc") == "https://basescan.org/tx/0xabc"
        assert address_url("0xdef") == "https://basescan.org/address/0xdef"

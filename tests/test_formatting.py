"""
Currency and date formatter tests
"""
import pytest

from garage_billing.utils.currency import format_currency, group_indian
from garage_billing.utils.date import format_date, format_short_date, to_datetime

# 2026-10-18 09:05:00 UTC plus a sub-millisecond remainder
CREATED_AT = 1792314300 * 1_000_000_000 + 999_999


class TestFormatCurrency:
    """Indian grouping, rupee symbol, no decimals"""

    @pytest.mark.parametrize("amount, expected", [
        (0, "₹0"),
        (999, "₹999"),
        (1000, "₹1,000"),
        (12345, "₹12,345"),
        (100000, "₹1,00,000"),
        (1234560, "₹12,34,560"),
        (10000000, "₹1,00,00,000"),
        (-300, "-₹300"),
        (-1534000, "-₹15,34,000"),
    ])
    def test_format_currency(self, amount, expected):
        assert format_currency(amount) == expected

    def test_group_indian_short_strings_unchanged(self):
        assert group_indian("42") == "42"
        assert group_indian("560") == "560"


class TestFormatDate:
    """Timestamp rendering"""

    def test_format_date_in_display_zone(self):
        """
        Test: 09:05 UTC on 18 Oct 2026
        Expected: 02:35 pm IST
        """
        assert format_date(CREATED_AT) == "18 Oct 2026, 02:35 pm"

    def test_format_date_morning(self):
        """
        Test: 20:00 UTC on 5 Jan 2026
        Expected: next day 01:30 am IST
        """
        assert format_date(1767643200 * 1_000_000_000) == "06 Jan 2026, 01:30 am"

    def test_format_date_explicit_zone(self):
        assert format_date(CREATED_AT, "UTC") == "18 Oct 2026, 09:05 am"

    def test_noon_and_midnight(self):
        """
        Test: 12:00 and 00:00 UTC
        Expected: 12 o'clock in both day periods
        """
        noon = (1792314300 + 2 * 3600 + 55 * 60) * 1_000_000_000
        midnight = noon - 12 * 3600 * 1_000_000_000

        assert format_date(noon, "UTC") == "18 Oct 2026, 12:00 pm"
        assert format_date(midnight, "UTC") == "18 Oct 2026, 12:00 am"

    def test_sub_millisecond_precision_is_truncated(self):
        """
        Test: Timestamp with 999,999 ns past a whole millisecond
        Expected: truncated, not rounded up
        """
        moment = to_datetime(CREATED_AT, "UTC")

        assert moment.microsecond == 0
        assert moment.second == 0

    def test_format_short_date(self):
        assert format_short_date(CREATED_AT) == "18/10/2026"

    def test_format_short_date_single_digit_day_and_month(self):
        """
        Test: 5 Jan 2026 20:00 UTC, already 6 Jan in IST
        Expected: "6/1/2026" with no zero padding
        """
        assert format_short_date(1767643200 * 1_000_000_000) == "6/1/2026"

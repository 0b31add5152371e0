import pytest

from faculty_pay.money import format_currency, format_currency_inr, round_half_up


@pytest.mark.parametrize("value,expected", [(2.5, 3), (0.5, 1), (3.49, 3), (-2.5, -3), (75010.0, 75010)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


class TestFormatCurrency:

    def test_indian_grouping(self):
        assert format_currency(1234567) == "12,34,567"
        assert format_currency(108394) == "1,08,394"
        assert format_currency(999) == "999"
        assert format_currency(-1234567) == "-12,34,567"

    def test_rounds_before_grouping(self):
        assert format_currency(1000.5) == "1,001"

    def test_compact(self):
        assert format_currency(12300000, compact=True) == "1.23 Cr"
        assert format_currency(250000, compact=True) == "2.50 L"
        assert format_currency(1500, compact=True) == "1.5K"
        assert format_currency(999, compact=True) == "999"

    def test_rupee_prefix(self):
        assert format_currency_inr(1300728) == "₹13,00,728"

from __future__ import annotations

import pytest
from babel.numbers import UnknownCurrencyError

from investment_calculator.core.formatting import (
    CurrencyFormatter,
    euro_formatter,
    formatter,
    indian_formatter,
)


def test_format_whole_dollars():
    usd = CurrencyFormatter("en-US", "USD")

    assert usd.format(1000) == "$1,000"
    assert usd.format(0) == "$0"
    assert usd.format(1234567) == "$1,234,567"


def test_format_rounds_half_away_from_zero():
    assert formatter.format(2.5) == "$3"
    assert formatter.format(1499.49) == "$1,499"
    assert formatter.format(1499.5) == "$1,500"
    assert formatter.format(-1234.5) == "-$1,235"


def test_compact_appends_suffix_to_formatted_divided_value():
    assert formatter.format_compact(1_000_000) == "$1M"
    assert formatter.format_compact(2_400_000) == "$2M"
    assert formatter.format_compact(1_500_000) == "$2M"
    assert formatter.format_compact(1000) == "$1K"
    assert formatter.format_compact(45_600) == "$46K"
    assert formatter.format_compact(500) == "$500"


def test_compact_below_thresholds_is_plain_format():
    # 999.99 is under the K threshold even though it rounds to 1,000
    assert formatter.format_compact(999.99) == "$1,000"
    assert formatter.format_compact(-5_000_000) == "-$5,000,000"


def test_locale_spellings_are_normalised():
    usd = CurrencyFormatter("en-US", "usd")

    assert usd.locale == "en_US"
    assert usd.currency == "USD"
    assert repr(usd) == "CurrencyFormatter(locale='en_US', currency='USD')"


def test_indian_grouping():
    assert indian_formatter.format(100000) == "₹1,00,000"


def test_euro_formatter_uses_euro_symbol():
    assert "€" in euro_formatter.format(1000)
    assert euro_formatter.currency == "EUR"


def test_unknown_currency_is_rejected():
    with pytest.raises(UnknownCurrencyError):
        CurrencyFormatter("en_US", "XYZ")


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_values_are_rejected(value):
    with pytest.raises(ValueError):
        formatter.format(value)


@pytest.mark.parametrize("exponent", [27, 28, 34, 300])
def test_format_very_large_values(exponent):
    # powers of ten print exactly as floats, so the digits are known
    assert formatter.format(float(f"1e{exponent}")) == f"${10**exponent:,}"


def test_compact_very_large_value_keeps_suffix():
    compact = formatter.format_compact(1e30)

    assert compact.startswith("$") and compact.endswith("M")
    assert len(compact[1:-1].replace(",", "")) == 25

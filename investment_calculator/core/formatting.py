"""Locale-aware whole-unit currency formatting."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

from babel import Locale
from babel.numbers import format_currency, validate_currency

# strips ".00" / ".##" from a CLDR number pattern
_FRACTION_DIGITS = re.compile(r"\.[0#]+")

# the largest finite float has 309 integer digits
_DECIMAL_PRECISION = 400

MILLION = 1_000_000
THOUSAND = 1_000


class CurrencyFormatter:
    """
    Formatter bound to one (locale, currency) pair.

    Output has no fractional digits; values are rounded half away from zero
    before the locale's currency pattern is applied.
    """

    __slots__ = ("_locale", "_currency", "_pattern")

    def __init__(self, locale: str = "en_US", currency: str = "USD"):
        self._locale = Locale.parse(locale.replace("-", "_"))
        code = currency.upper()
        validate_currency(code, self._locale)
        self._currency = code
        standard = self._locale.currency_formats["standard"].pattern
        self._pattern = _FRACTION_DIGITS.sub("", standard)

    @property
    def locale(self) -> str:
        return str(self._locale)

    @property
    def currency(self) -> str:
        return self._currency

    def __repr__(self) -> str:
        return f"CurrencyFormatter(locale={self.locale!r}, currency={self.currency!r})"

    def format(self, value: float) -> str:
        if not math.isfinite(value):
            raise ValueError(f"cannot format non-finite value {value!r}")
        with localcontext() as ctx:
            ctx.prec = _DECIMAL_PRECISION
            whole = Decimal(str(value)).to_integral_value(rounding=ROUND_HALF_UP)
            return format_currency(
                whole,
                self._currency,
                format=self._pattern,
                locale=self._locale,
                currency_digits=False,
            )

    def format_compact(self, value: float) -> str:
        # suffix goes on the formatted, already-divided amount: 1_500_000 -> "$2M"
        if value >= MILLION:
            return self.format(value / MILLION) + "M"
        if value >= THOUSAND:
            return self.format(value / THOUSAND) + "K"
        return self.format(value)


formatter = CurrencyFormatter("en_US", "USD")
indian_formatter = CurrencyFormatter("en_IN", "INR")
# CLDR has no en_EU; en_150 is "English (Europe)"
euro_formatter = CurrencyFormatter("en_150", "EUR")

"""Standalone growth formulas. Rates are percentages (7 means 7%)."""

from __future__ import annotations


def _compound(base: float, exponent: float) -> float:
    try:
        return base**exponent
    except OverflowError as exc:
        raise ValueError(f"growth factor {base!r} ** {exponent!r} is out of range") from exc


def calculate_cagr(initial_value: float, final_value: float, years: float) -> float:
    """
    Compound annual growth rate, as a percentage.

    Returns 0.0 when initial_value <= 0 or years <= 0. A negative final value
    has no real-valued CAGR and raises ValueError, as does a growth ratio too
    large to represent as a float.
    """
    if initial_value <= 0 or years <= 0:
        return 0.0
    if final_value < 0:
        raise ValueError("final value must not be negative to compute CAGR")
    return (_compound(final_value / initial_value, 1 / years) - 1) * 100


def adjust_for_inflation(present_value: float, inflation_rate: float, years: float) -> float:
    """
    Deflate a value by `years` of compounding inflation.

    A rate below -100% raises ValueError, as does a deflator too large to
    represent as a float. Exactly -100% raises ZeroDivisionError.
    """
    base = 1 + inflation_rate / 100
    if base < 0:
        raise ValueError(f"inflation rate {inflation_rate!r}% is below -100%")
    return present_value / _compound(base, years)

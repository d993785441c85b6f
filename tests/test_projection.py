from __future__ import annotations

from math import isclose

import pytest

from investment_calculator.core.projection import (
    InvalidInputError,
    calculate_investment_results,
    compare_scenarios,
)
from investment_calculator.models import InvestmentInput


def make_input(initial=10000.0, annual=0.0, rate=10.0, years=2) -> InvestmentInput:
    return InvestmentInput(
        initialInvestment=initial,
        annualInvestment=annual,
        expectedReturn=rate,
        duration=years,
    )


def test_lump_sum_compounds_yearly():
    results = calculate_investment_results(make_input())

    assert [row.year for row in results.yearlyData] == [1, 2]
    assert results.yearlyData[0].valueEndOfYear == 11000
    assert results.yearlyData[0].interest == 1000
    assert results.yearlyData[1].valueEndOfYear == 12100
    assert results.yearlyData[1].interest == 1100

    assert results.summary.totalInvested == 10000
    assert results.summary.totalInterest == 2100
    assert results.summary.finalValue == 12100
    assert isclose(results.summary.totalReturn, 21.0)


def test_contribution_is_added_after_interest():
    """
    The year's contribution earns nothing in the year it is made:
    year 1 = 10000 * 1.1 + 5000, year 2 = 16000 * 1.1 + 5000.
    """
    results = calculate_investment_results(make_input(annual=5000))

    assert results.yearlyData[0].valueEndOfYear == 16000
    assert results.yearlyData[1].valueEndOfYear == 22600
    assert results.yearlyData[1].interest == 1600
    assert results.yearlyData[1].annualInvestment == 5000
    assert results.yearlyData[1].totalInvested == 20000
    assert results.yearlyData[1].totalInterest == 2600
    assert results.summary.totalInvested == 20000
    assert results.summary.finalValue == 22600


def test_zero_return_accumulates_contributions_only():
    results = calculate_investment_results(make_input(initial=1000, annual=500, rate=0, years=4))

    assert [row.valueEndOfYear for row in results.yearlyData] == [1500, 2000, 2500, 3000]
    assert all(row.interest == 0 for row in results.yearlyData)
    assert results.summary.totalReturn == 0


def test_contributions_only_start_from_zero_balance():
    results = calculate_investment_results(make_input(initial=0, annual=1000, rate=5, years=3))

    # nothing to earn interest on in year 1
    assert results.yearlyData[0].interest == 0
    assert results.yearlyData[0].valueEndOfYear == 1000
    assert isclose(results.yearlyData[1].valueEndOfYear, 2050.0)
    assert isclose(results.yearlyData[2].valueEndOfYear, 3152.5)


@pytest.mark.parametrize(
    "initial,annual,rate,years",
    [
        (10000, 5000, 6, 10),
        (0, 1200, 7.5, 40),
        (250000, 0, 3.25, 100),
        (1, 1, 100, 25),
        (5000, 10000, 5, 1),
    ],
)
def test_projection_invariants(initial, annual, rate, years):
    results = calculate_investment_results(make_input(initial, annual, rate, years))
    summary = results.summary

    assert len(results.yearlyData) == years
    assert [row.year for row in results.yearlyData] == list(range(1, years + 1))
    assert summary.totalInvested == pytest.approx(initial + years * annual)
    assert summary.finalValue == pytest.approx(summary.totalInvested + summary.totalInterest, rel=1e-12)
    assert summary.finalValue == results.yearlyData[-1].valueEndOfYear
    assert summary.totalInterest == results.yearlyData[-1].totalInterest
    assert summary.totalReturn == pytest.approx(
        (summary.finalValue - summary.totalInvested) / summary.totalInvested * 100
    )


def test_repeated_calls_are_identical():
    payload = make_input(initial=12345.67, annual=890.12, rate=6.5, years=37)

    assert calculate_investment_results(payload) == calculate_investment_results(payload)


def test_invalid_input_raises_with_all_messages():
    payload = make_input(initial=-1000, annual=5000, rate=150, years=10)

    with pytest.raises(InvalidInputError, match="Invalid input") as excinfo:
        calculate_investment_results(payload)

    assert excinfo.value.errors == [
        "Initial investment cannot be negative",
        "Expected return must be between 0% and 100%",
    ]
    assert str(excinfo.value) == (
        "Invalid input: Initial investment cannot be negative, "
        "Expected return must be between 0% and 100%"
    )


def test_both_amounts_zero_is_rejected_before_total_return_division():
    with pytest.raises(InvalidInputError):
        calculate_investment_results(make_input(initial=0, annual=0))


def test_compare_scenarios_picks_best_and_worst_by_total_return():
    slow = calculate_investment_results(make_input(rate=2, years=10))
    fast = calculate_investment_results(make_input(rate=9, years=10))
    flat = calculate_investment_results(make_input(rate=0, years=10))

    comparison = compare_scenarios([slow, fast, flat])

    assert comparison.finalValues == [
        slow.summary.finalValue,
        fast.summary.finalValue,
        flat.summary.finalValue,
    ]
    assert comparison.bestScenario == 1
    assert comparison.worstScenario == 2


def test_compare_scenarios_ties_resolve_to_first():
    same = calculate_investment_results(make_input())

    comparison = compare_scenarios([same, same])

    assert comparison.bestScenario == 0
    assert comparison.worstScenario == 0


def test_compare_scenarios_requires_input():
    with pytest.raises(ValueError):
        compare_scenarios([])

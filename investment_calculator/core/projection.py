from __future__ import annotations

import logging
from typing import List, Sequence

from investment_calculator.core.validation import validate_investment_input
from investment_calculator.models import (
    InvestmentInput,
    InvestmentResults,
    InvestmentSummary,
    InvestmentYearData,
    ScenarioComparison,
)

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__(f"Invalid input: {', '.join(errors)}")
        self.errors = errors


def calculate_investment_results(input: InvestmentInput) -> InvestmentResults:
    """
    Build the year-by-year projection for one input.

    Order of operations (per year):
      1) Interest accrues on the balance carried in from last year.
      2) Add interest, then this year's contribution (no growth this year).
      3) Roll the running principal and interest totals forward.
      4) Record the row.

    Raises InvalidInputError instead of computing on input that fails validation.
    """
    validation = validate_investment_input(input)
    if not validation.isValid:
        logger.debug("rejected projection input: %s", validation.errors)
        raise InvalidInputError(validation.errors)

    rate = input.expectedReturn / 100
    contribution = input.annualInvestment

    value = input.initialInvestment
    total_invested = input.initialInvestment
    total_interest = 0.0

    yearly: List[InvestmentYearData] = []
    for year in range(1, input.duration + 1):
        year_interest = value * rate
        value = value + year_interest + contribution
        total_invested += contribution
        total_interest += year_interest

        yearly.append(
            InvestmentYearData(
                year=year,
                interest=year_interest,
                valueEndOfYear=value,
                annualInvestment=contribution,
                totalInterest=total_interest,
                totalInvested=total_invested,
            )
        )

    final_value = value
    # validation rules out total_invested == 0; keep the guard for direct callers of the formula
    if total_invested:
        total_return = (final_value - total_invested) / total_invested * 100
    else:
        total_return = 0.0

    return InvestmentResults(
        yearlyData=yearly,
        summary=InvestmentSummary(
            totalInvested=total_invested,
            totalInterest=total_interest,
            finalValue=final_value,
            totalReturn=total_return,
        ),
    )


def compare_scenarios(scenarios: Sequence[InvestmentResults]) -> ScenarioComparison:
    """Rank results by total return; ties resolve to the earliest scenario."""
    if not scenarios:
        raise ValueError("at least one scenario is required for comparison")

    final_values = [s.summary.finalValue for s in scenarios]
    total_returns = [s.summary.totalReturn for s in scenarios]

    return ScenarioComparison(
        finalValues=final_values,
        totalReturns=total_returns,
        bestScenario=total_returns.index(max(total_returns)),
        worstScenario=total_returns.index(min(total_returns)),
    )


__all__ = [
    "InvalidInputError",
    "calculate_investment_results",
    "compare_scenarios",
]

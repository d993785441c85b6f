"""Chart and pie-chart shapes derived from a projection."""

from __future__ import annotations

from typing import List

from investment_calculator.models import ChartDataPoint, InvestmentResults, PortfolioBreakdown

INVESTED_CAPITAL = "Invested Capital"
INTEREST_EARNED = "Interest Earned"

DEFAULT_INVESTED_COLOR = "#3b82f6"
DEFAULT_INTEREST_COLOR = "#10b981"


def convert_to_chart_data(results: InvestmentResults) -> List[ChartDataPoint]:
    return [
        ChartDataPoint(
            year=row.year,
            value=row.valueEndOfYear,
            invested=row.totalInvested,
            interest=row.totalInterest,
        )
        for row in results.yearlyData
    ]


def _share(part: float, total: float) -> float:
    # zero total => 0% rather than NaN
    if total == 0:
        return 0.0
    return part / total * 100


def calculate_portfolio_breakdown(
    results: InvestmentResults,
    invested_color: str = DEFAULT_INVESTED_COLOR,
    interest_color: str = DEFAULT_INTEREST_COLOR,
) -> List[PortfolioBreakdown]:
    """
    Split the final value into invested capital and interest earned.

    Always two entries in that order. Percentages sum to 100 when the total
    is positive; a zero total yields 0.0 for both instead of NaN.
    """
    total_invested = results.summary.totalInvested
    total_interest = results.summary.totalInterest
    total_value = total_invested + total_interest

    return [
        PortfolioBreakdown(
            category=INVESTED_CAPITAL,
            value=total_invested,
            percentage=_share(total_invested, total_value),
            color=invested_color,
        ),
        PortfolioBreakdown(
            category=INTEREST_EARNED,
            value=total_interest,
            percentage=_share(total_interest, total_value),
            color=interest_color,
        ),
    ]

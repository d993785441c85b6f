"""Request and response contracts for the HTTP API."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from investment_calculator.models import (
    ChartDataPoint,
    InvestmentInput,
    InvestmentResults,
    PortfolioBreakdown,
    ThemeMode,
)


class CompareRequest(BaseModel):
    """Several inputs projected and ranked against each other."""

    model_config = ConfigDict(extra="forbid")

    inputs: List[InvestmentInput] = Field(..., min_length=1)


class FormattedSummary(BaseModel):
    totalInvested: str
    totalInterest: str
    finalValue: str
    finalValueCompact: str


class ProjectionResponse(BaseModel):
    """Everything the results page renders for one input."""

    results: InvestmentResults
    chartData: List[ChartDataPoint]
    portfolioBreakdown: List[PortfolioBreakdown]
    formatted: FormattedSummary


class CagrRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    initialValue: float
    finalValue: float
    years: float


class InflationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    presentValue: float
    inflationRate: float = Field(..., description="Annual inflation as a percentage.")
    years: float


class FormatRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    value: float
    locale: Optional[str] = Field(None, description="Defaults to the configured locale.")
    currency: Optional[str] = Field(None, description="ISO 4217 code; defaults to the configured currency.")


class FormatResponse(BaseModel):
    formatted: str
    compact: str


class SaveScenarioRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1, max_length=120)
    input: InvestmentInput


class UpdateScenarioRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1, max_length=120)
    input: InvestmentInput


class ThemeUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mode: Optional[ThemeMode] = None
    primaryColor: Optional[str] = None
    accentColor: Optional[str] = None

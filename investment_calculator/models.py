from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class InvestmentInput(BaseModel):
    # bounds live in core.validation so violations come back as messages
    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    initialInvestment: float
    annualInvestment: float
    expectedReturn: float
    duration: int


class PartialInvestmentInput(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    initialInvestment: Optional[float] = None
    annualInvestment: Optional[float] = None
    expectedReturn: Optional[float] = None
    duration: Optional[int] = None


class ValidationResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    isValid: bool
    errors: List[str] = Field(default_factory=list)


class InvestmentYearData(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int = Field(ge=1)
    interest: float
    valueEndOfYear: float
    annualInvestment: float
    totalInterest: float
    totalInvested: float


class InvestmentSummary(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    totalInvested: float
    totalInterest: float
    finalValue: float
    totalReturn: float


class InvestmentResults(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    yearlyData: List[InvestmentYearData]
    summary: InvestmentSummary


class ChartDataPoint(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    year: int
    value: float
    invested: float
    interest: float


class PortfolioBreakdown(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    category: str
    value: float
    percentage: float
    color: str


class ScenarioComparison(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    finalValues: List[float]
    totalReturns: List[float]
    bestScenario: int
    worstScenario: int


class InvestmentTemplateConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    name: str
    description: str
    defaultInput: PartialInvestmentInput
    suggestedDuration: int = Field(ge=1, le=100)


class InvestmentScenario(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str
    name: str
    input: InvestmentInput
    results: InvestmentResults
    createdAt: datetime
    updatedAt: datetime


ThemeMode = Literal["light", "dark"]


class ThemeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    mode: ThemeMode = "light"
    primaryColor: str = Field(default="#3b82f6", pattern=r"^#[0-9a-fA-F]{6}$")
    accentColor: str = Field(default="#10b981", pattern=r"^#[0-9a-fA-F]{6}$")

"""Domain checks for projection inputs."""

from __future__ import annotations

from typing import List

from investment_calculator.models import InvestmentInput, ValidationResult

MIN_RETURN_PCT = 0.0
MAX_RETURN_PCT = 100.0
MIN_DURATION_YEARS = 1
MAX_DURATION_YEARS = 100


def validate_investment_input(input: InvestmentInput) -> ValidationResult:
    """
    Check every rule independently and collect all messages.

    Never raises for a domain violation; callers decide how to surface errors.
    """
    errors: List[str] = []

    if input.initialInvestment < 0:
        errors.append("Initial investment cannot be negative")

    if input.annualInvestment < 0:
        errors.append("Annual investment cannot be negative")

    if input.expectedReturn < MIN_RETURN_PCT or input.expectedReturn > MAX_RETURN_PCT:
        errors.append("Expected return must be between 0% and 100%")

    if input.duration < MIN_DURATION_YEARS or input.duration > MAX_DURATION_YEARS:
        errors.append("Duration must be between 1 and 100 years")

    if input.initialInvestment == 0 and input.annualInvestment == 0:
        errors.append("At least one investment amount must be greater than 0")

    return ValidationResult(isValid=not errors, errors=errors)

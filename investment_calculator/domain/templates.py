from __future__ import annotations

from typing import Dict, List

from investment_calculator.models import (
    InvestmentInput,
    InvestmentTemplateConfig,
    PartialInvestmentInput,
)


class TemplateNotFoundError(KeyError):
    def __init__(self, template_id: str):
        super().__init__(template_id)
        self.template_id = template_id

    def __str__(self) -> str:
        return f"unknown investment template '{self.template_id}'"


# values the input form starts from and resets to
DEFAULT_INPUT = InvestmentInput(
    initialInvestment=10000,
    annualInvestment=5000,
    expectedReturn=6,
    duration=10,
)


def _template(
    template_id: str,
    name: str,
    description: str,
    initial: float,
    annual: float,
    expected_return: float,
    duration: int,
) -> InvestmentTemplateConfig:
    return InvestmentTemplateConfig(
        id=template_id,
        name=name,
        description=description,
        defaultInput=PartialInvestmentInput(
            initialInvestment=initial,
            annualInvestment=annual,
            expectedReturn=expected_return,
            duration=duration,
        ),
        suggestedDuration=duration,
    )


INVESTMENT_TEMPLATES: Dict[str, InvestmentTemplateConfig] = {
    t.id: t
    for t in (
        _template(
            "retirement",
            "Retirement Fund",
            "Long-term retirement savings with moderate risk",
            10000, 12000, 7, 30,
        ),
        _template(
            "college-fund",
            "College Fund",
            "Education savings for children",
            5000, 6000, 6, 18,
        ),
        _template(
            "emergency-fund",
            "Emergency Fund",
            "Short-term emergency savings",
            1000, 2000, 3, 5,
        ),
        _template(
            "house-down-payment",
            "House Down Payment",
            "Savings for home purchase",
            5000, 10000, 5, 10,
        ),
    )
}


def list_templates() -> List[InvestmentTemplateConfig]:
    return list(INVESTMENT_TEMPLATES.values())


def get_template(template_id: str) -> InvestmentTemplateConfig:
    try:
        return INVESTMENT_TEMPLATES[template_id]
    except KeyError:
        raise TemplateNotFoundError(template_id) from None


def apply_template(base: InvestmentInput, template_id: str) -> InvestmentInput:
    """Overlay a template's fields on `base`; fields the template leaves unset keep their value."""
    template = get_template(template_id)
    overrides = template.defaultInput.model_dump(exclude_none=True)
    return base.model_copy(update=overrides)

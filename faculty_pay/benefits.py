from dataclasses import dataclass

from pydantic import BaseModel, Field

from faculty_pay.money import round_half_up


class Benefits(BaseModel):
    """Monthly benefit amounts plus PPF and gratuity as percent of basic."""
    housing: int = Field(default=0, ge=0)
    professional_dev: int = Field(default=0, ge=0)
    ppf_percent: float = Field(default=0, ge=0)
    gratuity_percent: float = Field(default=0, ge=0)
    health_insurance: int = Field(default=0, ge=0)


@dataclass(frozen=True)
class BenefitsBreakdown:
    housing: int
    professional_dev: int
    ppf_amount: int
    gratuity_amount: int
    health_insurance: int
    total_monthly: int
    total_annual: int


def calculate_benefits(basic, benefits: Benefits) -> BenefitsBreakdown:
    ppf_amount = round_half_up(basic * (benefits.ppf_percent / 100))
    gratuity_amount = round_half_up(basic * (benefits.gratuity_percent / 100))
    total_monthly = (
        benefits.housing
        + benefits.professional_dev
        + ppf_amount
        + gratuity_amount
        + benefits.health_insurance
    )
    return BenefitsBreakdown(
        housing=benefits.housing,
        professional_dev=benefits.professional_dev,
        ppf_amount=ppf_amount,
        gratuity_amount=gratuity_amount,
        health_insurance=benefits.health_insurance,
        total_monthly=total_monthly,
        total_annual=total_monthly * 12,
    )

"""Per-position salary, CTC and premium range checks.

Violations are reported as flags on :class:`EnforcementStatus`; nothing here
raises for out-of-range money. In hard mode the salary and CTC are clamped to
the configured ceilings, in soft mode they are returned untouched.
"""

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

from pydantic import BaseModel, Field

from faculty_pay.benefits import BenefitsBreakdown
from faculty_pay.money import round_half_up
from faculty_pay.pay_data import EnforcementMode

logger = logging.getLogger(__name__)

# typical annual premium band, checked only when a position has no range of its own
TYPICAL_MIN_PREMIUM = 300000
TYPICAL_MAX_PREMIUM = 1200000


class PositionPremiumRange(BaseModel):
    """Annual premium bounds; a bound of 0 is inactive."""
    min_premium: int = Field(default=0, ge=0)
    max_premium: int = Field(default=0, ge=0)

    @property
    def is_configured(self):
        return self.min_premium > 0 or self.max_premium > 0


class PositionSalaryCap(BaseModel):
    """Annual WPU salary and CTC bounds; a bound of 0 is inactive."""
    min_wpu_salary_annual: int = Field(default=0, ge=0)
    max_wpu_salary_annual: int = Field(default=0, ge=0)
    max_wpu_ctc_annual: int = Field(default=0, ge=0)


@dataclass(frozen=True)
class EnforcementStatus:
    salary_capped: bool = False
    salary_below_min: bool = False
    ctc_capped: bool = False
    premium_below_min: bool = False
    premium_above_max: bool = False
    # pre-clamp figures, kept for display next to capped values
    original_salary_annual: int = 0
    original_ctc_annual: int = 0

    @property
    def has_violation(self):
        return (
            self.salary_capped
            or self.salary_below_min
            or self.ctc_capped
            or self.premium_below_min
            or self.premium_above_max
        )


class EnforcementOutcome(NamedTuple):
    status: EnforcementStatus
    total_salary_monthly: int
    total_ctc_monthly: int


def effective_max_ctc(salary_cap: Optional[PositionSalaryCap], benefits: BenefitsBreakdown):
    if salary_cap is None:
        return 0
    if salary_cap.max_wpu_ctc_annual > 0:
        return salary_cap.max_wpu_ctc_annual
    if salary_cap.max_wpu_salary_annual > 0:
        return salary_cap.max_wpu_salary_annual + benefits.total_annual
    return 0


def evaluate_enforcement(
    total_salary_monthly,
    benefits: BenefitsBreakdown,
    annual_premium,
    enforcement_mode=EnforcementMode.SOFT,
    premium_range: Optional[PositionPremiumRange] = None,
    salary_cap: Optional[PositionSalaryCap] = None,
) -> EnforcementOutcome:
    total_ctc_monthly = total_salary_monthly + benefits.total_monthly
    original_salary_annual = total_salary_monthly * 12
    original_ctc_annual = total_ctc_monthly * 12

    salary_capped = False
    salary_below_min = False
    ctc_capped = False
    premium_below_min = False
    premium_above_max = False

    if premium_range is not None:
        if premium_range.max_premium > 0 and annual_premium > premium_range.max_premium:
            premium_above_max = True
        if premium_range.min_premium > 0 and annual_premium < premium_range.min_premium:
            premium_below_min = True

    if salary_cap is not None:
        if salary_cap.min_wpu_salary_annual > 0 and original_salary_annual < salary_cap.min_wpu_salary_annual:
            salary_below_min = True
        if salary_cap.max_wpu_salary_annual > 0 and original_salary_annual > salary_cap.max_wpu_salary_annual:
            salary_capped = True

        max_ctc = effective_max_ctc(salary_cap, benefits)
        if max_ctc > 0 and original_ctc_annual > max_ctc:
            ctc_capped = True

        if EnforcementMode(enforcement_mode) == EnforcementMode.HARD:
            if salary_capped:
                total_salary_monthly = round_half_up(salary_cap.max_wpu_salary_annual / 12)
            total_ctc_monthly = total_salary_monthly + benefits.total_monthly
            if max_ctc > 0 and total_ctc_monthly * 12 > max_ctc:
                total_ctc_monthly = round_half_up(max_ctc / 12)
                ctc_capped = True
            if salary_capped or ctc_capped:
                logger.debug(
                    "hard cap applied: salary %s -> %s, ctc %s -> %s",
                    original_salary_annual, total_salary_monthly * 12,
                    original_ctc_annual, total_ctc_monthly * 12,
                )

    status = EnforcementStatus(
        salary_capped=salary_capped,
        salary_below_min=salary_below_min,
        ctc_capped=ctc_capped,
        premium_below_min=premium_below_min,
        premium_above_max=premium_above_max,
        original_salary_annual=original_salary_annual,
        original_ctc_annual=original_ctc_annual,
    )
    return EnforcementOutcome(status, total_salary_monthly, total_ctc_monthly)


def typical_premium_warning(annual_premium, premium_range: Optional[PositionPremiumRange] = None):
    """Message when the premium leaves the typical band, or None.

    A position with its own premium range is judged by that range instead,
    through the flags of :func:`evaluate_enforcement`.
    """
    if premium_range is not None and premium_range.is_configured:
        return None
    if annual_premium < TYPICAL_MIN_PREMIUM:
        return "Premium below typical 3L minimum"
    if annual_premium > TYPICAL_MAX_PREMIUM:
        return "Premium above typical 12L maximum"
    return None

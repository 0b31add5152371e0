"""WPU GOA enhanced salary built on top of the UGC baseline.

The multiplier can act on the whole UGC salary (method A, basic stays at the
UGC figure and the uplift is itemised as a bonus) or on basic pay alone
(method B, every allowance is recomputed on the inflated basic). The
financial strategy then decides how that multiplier result combines with the
flat annual premium. Whenever the premium path wins under method B, the pay
components fall back to the UGC values: the premium never inflates basic.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from faculty_pay.baseline import HraConfig, UGCSalaryBreakdown, calculate_da, calculate_hra, calculate_ta
from faculty_pay.benefits import Benefits, BenefitsBreakdown, calculate_benefits
from faculty_pay.enforcement import (
    EnforcementStatus,
    PositionPremiumRange,
    PositionSalaryCap,
    evaluate_enforcement,
)
from faculty_pay.money import round_half_up
from faculty_pay.pay_data import EnforcementMode, FinancialStrategy, HraMode, MultiplierMethod

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WPUSalaryBreakdown:
    basic: int
    da: int
    hra: int
    hra_mode: HraMode
    ta: int
    special_allowance: int
    multiplier_bonus: int
    premium_monthly: int
    total_salary_monthly: int
    total_salary_annual: int
    benefits: BenefitsBreakdown
    total_ctc_monthly: int
    total_ctc_annual: int
    method: MultiplierMethod
    strategy: FinancialStrategy
    enforcement: EnforcementStatus


def calculate_wpu_salary(
    ugc: UGCSalaryBreakdown,
    multiplier,
    annual_premium,
    strategy,
    method,
    benefits: Benefits,
    da_percent,
    city_type,
    level,
    special_allowance=0,
    is_tpta_city=False,
    hra_config: Optional[HraConfig] = None,
    enforcement_mode=EnforcementMode.SOFT,
    premium_range: Optional[PositionPremiumRange] = None,
    salary_cap: Optional[PositionSalaryCap] = None,
) -> WPUSalaryBreakdown:
    strategy = FinancialStrategy(strategy)
    method = MultiplierMethod(method)

    if method == MultiplierMethod.METHOD_A:
        basic = ugc.basic
        da = ugc.da
        hra, hra_mode = calculate_hra(ugc.basic, city_type, hra_config)
        ta = ugc.ta
        base_for_multiplier = basic + da + hra + ta + special_allowance
        multiplier_bonus = round_half_up(base_for_multiplier * (multiplier - 1.0))
    else:
        basic = round_half_up(ugc.basic * multiplier)
        da = calculate_da(basic, da_percent)
        hra, hra_mode = calculate_hra(basic, city_type, hra_config)
        ta = calculate_ta(level, da_percent, is_tpta_city)
        multiplier_bonus = 0

    base_salary_monthly = basic + da + hra + ta + special_allowance + multiplier_bonus
    premium_monthly = round_half_up(annual_premium / 12)

    multiplier_result = base_salary_monthly
    premium_result = ugc.total_monthly + premium_monthly

    reported_bonus = multiplier_bonus
    reported_premium = premium_monthly
    use_premium_path = False

    if strategy == FinancialStrategy.MULTIPLIER:
        total_salary_monthly = multiplier_result
        reported_premium = 0
    elif strategy == FinancialStrategy.PREMIUM:
        total_salary_monthly = premium_result
        reported_bonus = 0
        use_premium_path = True
    elif strategy == FinancialStrategy.BOTH:
        total_salary_monthly = base_salary_monthly + premium_monthly
    elif strategy == FinancialStrategy.HIGHER:
        if multiplier_result >= premium_result:
            total_salary_monthly = multiplier_result
            reported_premium = 0
        else:
            total_salary_monthly = premium_result
            reported_bonus = 0
            use_premium_path = True
    else:
        if multiplier_result <= premium_result:
            total_salary_monthly = multiplier_result
            reported_premium = 0
        else:
            total_salary_monthly = premium_result
            reported_bonus = 0
            use_premium_path = True

    if use_premium_path and method == MultiplierMethod.METHOD_B:
        basic = ugc.basic
        da = ugc.da
        hra = ugc.hra
        hra_mode = ugc.hra_mode
        ta = ugc.ta

    benefits_breakdown = calculate_benefits(basic, benefits)
    outcome = evaluate_enforcement(
        total_salary_monthly,
        benefits_breakdown,
        annual_premium,
        enforcement_mode,
        premium_range,
        salary_cap,
    )
    logger.debug(
        "WPU salary level=%s method=%s strategy=%s salary=%s ctc=%s",
        level, method.value, strategy.value,
        outcome.total_salary_monthly, outcome.total_ctc_monthly,
    )

    return WPUSalaryBreakdown(
        basic=basic,
        da=da,
        hra=hra,
        hra_mode=hra_mode,
        ta=ta,
        special_allowance=special_allowance,
        multiplier_bonus=reported_bonus,
        premium_monthly=reported_premium,
        total_salary_monthly=outcome.total_salary_monthly,
        total_salary_annual=outcome.total_salary_monthly * 12,
        benefits=benefits_breakdown,
        total_ctc_monthly=outcome.total_ctc_monthly,
        total_ctc_annual=outcome.total_ctc_monthly * 12,
        method=method,
        strategy=strategy,
        enforcement=outcome.status,
    )

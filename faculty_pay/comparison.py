import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np
import pandas as pd

from faculty_pay.baseline import HraConfig, UGCSalaryBreakdown, calculate_ugc_salary
from faculty_pay.benefits import Benefits
from faculty_pay.enforcement import PositionPremiumRange, PositionSalaryCap
from faculty_pay.enhanced import WPUSalaryBreakdown, calculate_wpu_salary
from faculty_pay.pay_data import FACULTY_POSITIONS, EnforcementMode
from faculty_pay.pay_matrix import get_cell_amount, get_position, suggest_cell_from_experience
from faculty_pay.projection import calculate_8th_cpc_salary
from faculty_pay.settings import PolicySettings, get_benefits_for_position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComparisonResult:
    ugc: UGCSalaryBreakdown
    wpu: WPUSalaryBreakdown
    premium_amount_monthly: int
    premium_amount_annual: int
    premium_percentage: float


def calculate_comparison(
    level,
    cell_index,
    da_percent,
    city_type,
    multiplier,
    annual_premium,
    strategy,
    method,
    benefits: Benefits,
    special_allowance=0,
    is_tpta_city=False,
    hra_config: Optional[HraConfig] = None,
    enforcement_mode=EnforcementMode.SOFT,
    premium_range: Optional[PositionPremiumRange] = None,
    salary_cap: Optional[PositionSalaryCap] = None,
) -> ComparisonResult:
    basic = get_cell_amount(level, cell_index)

    # statutory HRA: the institution's housing policy only shapes the WPU side
    ugc = calculate_ugc_salary(basic, da_percent, city_type, level, special_allowance, is_tpta_city)
    wpu = calculate_wpu_salary(
        ugc, multiplier, annual_premium, strategy, method, benefits, da_percent, city_type, level,
        special_allowance, is_tpta_city, hra_config, enforcement_mode, premium_range, salary_cap,
    )

    premium_amount_monthly = wpu.total_ctc_monthly - ugc.total_monthly
    if ugc.total_monthly > 0:
        premium_percentage = premium_amount_monthly / ugc.total_monthly * 100
    else:
        premium_percentage = 0.0
    return ComparisonResult(
        ugc=ugc,
        wpu=wpu,
        premium_amount_monthly=premium_amount_monthly,
        premium_amount_annual=premium_amount_monthly * 12,
        premium_percentage=premium_percentage,
    )


def compare_position(settings: PolicySettings, position_id, cell_index, **overrides) -> ComparisonResult:
    """Run a comparison for one catalog position using the policy settings.

    ``overrides`` replaces any per-call knob the calculator page lets the user
    tweak without saving it: ``da_percent``, ``city_type``, ``multiplier``,
    ``annual_premium``, ``strategy`` and ``benefits``.
    """
    position = get_position(position_id)
    benefits = overrides.get("benefits")
    if benefits is None:
        benefits = get_benefits_for_position(settings, position.id, position.level)
    return calculate_comparison(
        position.level,
        cell_index,
        overrides.get("da_percent", settings.da_percentage),
        overrides.get("city_type", settings.city_type),
        overrides.get("multiplier", settings.base_multiplier),
        overrides.get("annual_premium", settings.annual_premium),
        overrides.get("strategy", settings.financial_strategy),
        settings.multiplier_method,
        benefits,
        position.special_allowance,
        settings.is_tpta_city,
        settings.hra_config,
        settings.enforcement_mode,
        settings.position_premium_ranges.get(position.id),
        settings.position_salary_caps.get(position.id),
    )


def project_position(settings: PolicySettings, position_id, result: ComparisonResult, city_type=None):
    position = get_position(position_id)
    return calculate_8th_cpc_salary(
        result.ugc.basic,
        settings.eighth_cpc_fitment_factor,
        settings.eighth_cpc_da_percent,
        city_type or settings.city_type,
        position.level,
        position.special_allowance,
        settings.is_tpta_city,
        settings.hra_config,
        result.ugc.total_monthly,
    )


def compare_all_positions(settings: PolicySettings, position_ids=None):
    """One row per catalog position at the cell its minimum experience suggests."""
    records = []
    for position in FACULTY_POSITIONS:
        if position_ids is not None and position.id not in position_ids:
            continue
        cell_index = suggest_cell_from_experience(position.level, position.min_experience)
        result = compare_position(settings, position.id, cell_index)
        eighth_cpc = project_position(settings, position.id, result)
        records.append({
            "Position": position.short_title,
            "Level": position.level,
            "Cell": cell_index + 1,
            "UGC Basic": result.ugc.basic,
            "UGC Annual": result.ugc.total_annual,
            "8th CPC Annual": eighth_cpc.total_annual,
            "WPU Salary": result.wpu.total_salary_annual,
            "WPU Benefits": result.wpu.benefits.total_annual,
            "WPU CTC": result.wpu.total_ctc_annual,
            "Premium Annual": result.premium_amount_annual,
            "Salary Capped": result.wpu.enforcement.salary_capped,
            "CTC Capped": result.wpu.enforcement.ctc_capped,
        })
    df = pd.DataFrame(records)
    if not df.empty:
        ugc_annual = df["UGC Annual"].astype(float)
        df["Premium %"] = np.where(
            ugc_annual > 0,
            df["Premium Annual"] / ugc_annual.where(ugc_annual > 0, 1.0) * 100,
            0.0,
        ).round(1)
    logger.debug("Compared %d positions", len(df))
    return df

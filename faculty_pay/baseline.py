"""Statutory UGC 7th CPC salary: basic, DA, HRA, TA and special allowance."""

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

from pydantic import BaseModel, Field, field_validator

from faculty_pay.money import round_half_up
from faculty_pay.pay_data import HRA_RATES, TA_RATES, CityType, HraMode
from faculty_pay.pay_matrix import level_number

logger = logging.getLogger(__name__)


class HraConfig(BaseModel):
    """Institution housing policy; decides whether HRA is paid and how."""
    providing_housing: bool = True
    still_provide_hra: bool = False
    hra_mode: HraMode = HraMode.PERCENT
    lump_sum_value: int = Field(default=0, ge=0)

    @field_validator("hra_mode")
    @classmethod
    def _configurable_mode(cls, value):
        # "none" only describes a result, an institution cannot choose it
        if value == HraMode.NONE:
            raise ValueError("hra_mode must be percent or lumpsum")
        return value


class HraResult(NamedTuple):
    amount: int
    mode: HraMode


@dataclass(frozen=True)
class UGCSalaryBreakdown:
    basic: int
    da: int
    hra: int
    hra_mode: HraMode
    ta: int
    special_allowance: int
    total_monthly: int
    total_annual: int


def calculate_da(basic, da_percent):
    return round_half_up(basic * (da_percent / 100))


def calculate_hra(basic, city_type, hra_config: Optional[HraConfig] = None):
    if hra_config is not None:
        if hra_config.providing_housing and not hra_config.still_provide_hra:
            return HraResult(0, HraMode.NONE)
        if hra_config.hra_mode == HraMode.LUMPSUM:
            return HraResult(hra_config.lump_sum_value, HraMode.LUMPSUM)
    rate = HRA_RATES[CityType(city_type)]["rate"]
    return HraResult(round_half_up(basic * (rate / 100)), HraMode.PERCENT)


def calculate_ta(level, da_percent, is_tpta_city=False):
    level_num = level_number(level)
    if level_num >= 9:
        bracket = TA_RATES["level9Plus"]
    elif level_num >= 3:
        bracket = TA_RATES["level3to8"]
    else:
        bracket = TA_RATES["level1to2"]
    ta_base = bracket["tpta_city"] if is_tpta_city else bracket["other_city"]
    return ta_base + round_half_up(ta_base * (da_percent / 100))


def calculate_ugc_salary(
    basic,
    da_percent,
    city_type,
    level,
    special_allowance=0,
    is_tpta_city=False,
    hra_config: Optional[HraConfig] = None,
) -> UGCSalaryBreakdown:
    da = calculate_da(basic, da_percent)
    hra = calculate_hra(basic, city_type, hra_config)
    ta = calculate_ta(level, da_percent, is_tpta_city)
    total_monthly = basic + da + hra.amount + ta + special_allowance
    logger.debug("UGC salary level=%s basic=%s total=%s", level, basic, total_monthly)
    return UGCSalaryBreakdown(
        basic=basic,
        da=da,
        hra=hra.amount,
        hra_mode=hra.mode,
        ta=ta,
        special_allowance=special_allowance,
        total_monthly=total_monthly,
        total_annual=total_monthly * 12,
    )

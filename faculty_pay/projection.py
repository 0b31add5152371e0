# Projected 8th CPC pay: basic scaled by the fitment factor, DA restarts.

from dataclasses import dataclass
from typing import Optional

import pandas as pd

from faculty_pay.baseline import HraConfig, calculate_da, calculate_hra, calculate_ta
from faculty_pay.money import round_half_up
from faculty_pay.pay_data import BASE_CPC, NEXT_CPC, HraMode, load_pay_matrix


@dataclass(frozen=True)
class EighthCPCBreakdown:
    fitment_factor: float
    basic: int
    da: int
    hra: int
    hra_mode: HraMode
    ta: int
    special_allowance: int
    total_monthly: int
    total_annual: int
    increment_over_seventh_percent: float


def calculate_8th_cpc_salary(
    basic_7th,
    fitment_factor,
    da_percent,
    city_type,
    level,
    special_allowance=0,
    is_tpta_city=False,
    hra_config: Optional[HraConfig] = None,
    seventh_total_monthly=0,
) -> EighthCPCBreakdown:
    basic = round_half_up(basic_7th * fitment_factor)
    da = calculate_da(basic, da_percent)
    hra = calculate_hra(basic, city_type, hra_config)
    ta = calculate_ta(level, da_percent, is_tpta_city)
    total_monthly = basic + da + hra.amount + ta + special_allowance
    if seventh_total_monthly > 0:
        increment = (total_monthly - seventh_total_monthly) / seventh_total_monthly * 100
    else:
        increment = 0.0
    return EighthCPCBreakdown(
        fitment_factor=fitment_factor,
        basic=basic,
        da=da,
        hra=hra.amount,
        hra_mode=hra.mode,
        ta=ta,
        special_allowance=special_allowance,
        total_monthly=total_monthly,
        total_annual=total_monthly * 12,
        increment_over_seventh_percent=increment,
    )


def project_pay_matrix(fitment_factor, cpc=NEXT_CPC, base_matrix=None):
    if base_matrix is None:
        base_matrix = load_pay_matrix()
    new_table = base_matrix.copy()
    new_table['Basic_Pay'] = new_table['Basic_Pay'].map(lambda pay: round_half_up(pay * fitment_factor))
    new_table['CPC'] = cpc
    return new_table


def pay_matrix_with_projection(fitment_factor):
    base_matrix = load_pay_matrix()
    projected = project_pay_matrix(fitment_factor, base_matrix=base_matrix)
    return pd.concat([base_matrix, projected], ignore_index=True)


def pay_matrix_wide(pay_matrix, cpc=BASE_CPC):
    """Pivot one CPC of the long matrix into Pay_Position rows by Level columns."""
    table = pay_matrix[pay_matrix['CPC'] == cpc]
    wide = table.pivot(index='Pay_Position', columns='Level', values='Basic_Pay')
    levels = [level for level in load_pay_matrix()['Level'].unique() if level in wide.columns]
    return wide[levels].astype('Int64')

# Settings: policy knobs shared by every page

import streamlit as st

from faculty_pay.baseline import HraConfig
from faculty_pay.enforcement import PositionPremiumRange, PositionSalaryCap
from faculty_pay.pay_data import (
    FACULTY_POSITIONS,
    FINANCIAL_STRATEGIES,
    HRA_RATES,
    MULTIPLIER_METHODS,
    CityType,
    EnforcementMode,
    FinancialStrategy,
    HraMode,
    MultiplierMethod,
)
from faculty_pay.session import get_settings, reset_settings, save_settings
from faculty_pay.settings import (
    BASE_MULTIPLIER_RANGE,
    DA_PERCENT_RANGE,
    EIGHTH_DA_PERCENT_RANGE,
    FITMENT_FACTOR_RANGE,
    set_premium_range,
    set_salary_cap,
    update_settings,
)

st.title("Settings")

settings = get_settings()

col1, col2 = st.columns(2)
with col1:
    st.subheader("Calculation")
    methods = list(MultiplierMethod)
    method = st.radio(
        "Multiplier Method",
        methods,
        index=methods.index(settings.multiplier_method),
        format_func=lambda m: MULTIPLIER_METHODS[m][0],
    )
    st.caption(MULTIPLIER_METHODS[method][2])
    base_multiplier = st.number_input("Base Multiplier", *BASE_MULTIPLIER_RANGE,
                                      value=float(settings.base_multiplier), step=0.05)
    strategies = list(FinancialStrategy)
    strategy = st.selectbox(
        "Default Financial Strategy",
        strategies,
        index=strategies.index(settings.financial_strategy),
        format_func=lambda s: FINANCIAL_STRATEGIES[s][0],
    )
    annual_premium = st.number_input("Default Annual Premium (₹)", min_value=0,
                                     value=int(settings.annual_premium), step=10000)
with col2:
    st.subheader("Allowances")
    da_percentage = st.number_input("DA (%)", *DA_PERCENT_RANGE,
                                    value=float(settings.da_percentage), step=1.0)
    cities = list(CityType)
    city_type = st.selectbox("City Classification", cities, index=cities.index(settings.city_type),
                             format_func=lambda c: HRA_RATES[c]["label"])
    is_tpta_city = st.checkbox("TPTA City (higher transport allowance)", value=settings.is_tpta_city)
    st.subheader("8th Pay Commission")
    fitment = st.number_input("Fitment Factor", *FITMENT_FACTOR_RANGE,
                              value=float(settings.eighth_cpc_fitment_factor), step=0.01)
    eighth_da = st.number_input("DA after revision (%)", *EIGHTH_DA_PERCENT_RANGE,
                                value=float(settings.eighth_cpc_da_percent), step=1.0)

st.subheader("Housing & HRA")
h1, h2, h3, h4 = st.columns(4)
providing_housing = h1.checkbox("Providing housing", value=settings.hra_config.providing_housing)
still_provide_hra = h2.checkbox("Still pay HRA", value=settings.hra_config.still_provide_hra,
                                disabled=not providing_housing)
hra_mode = h3.selectbox("HRA Mode", [HraMode.PERCENT, HraMode.LUMPSUM],
                        index=0 if settings.hra_config.hra_mode != HraMode.LUMPSUM else 1,
                        format_func=lambda m: "Percent of basic" if m == HraMode.PERCENT else "Lump sum")
lump_sum_value = h4.number_input("Lump sum / month", min_value=0, value=settings.hra_config.lump_sum_value,
                                 step=500, disabled=hra_mode != HraMode.LUMPSUM)

st.subheader("Range Enforcement")
modes = list(EnforcementMode)
enforcement_mode = st.radio(
    "Mode", modes, index=modes.index(settings.enforcement_mode), horizontal=True,
    format_func=lambda m: "Soft warning" if m == EnforcementMode.SOFT else "Hard stop (cap values)",
)

updated = update_settings(
    settings,
    multiplier_method=method,
    base_multiplier=base_multiplier,
    financial_strategy=strategy,
    annual_premium=annual_premium,
    da_percentage=da_percentage,
    city_type=city_type,
    is_tpta_city=is_tpta_city,
    eighth_cpc_fitment_factor=fitment,
    eighth_cpc_da_percent=eighth_da,
    hra_config=HraConfig(
        providing_housing=providing_housing,
        still_provide_hra=still_provide_hra,
        hra_mode=hra_mode,
        lump_sum_value=lump_sum_value,
    ),
    enforcement_mode=enforcement_mode,
)

for position in FACULTY_POSITIONS:
    with st.expander(f"{position.title}: salary caps and premium range"):
        cap = updated.position_salary_caps.get(position.id, PositionSalaryCap())
        premium = updated.position_premium_ranges.get(position.id, PositionPremiumRange())
        c1, c2, c3 = st.columns(3)
        new_cap = PositionSalaryCap(
            min_wpu_salary_annual=c1.number_input("Min salary / yr", min_value=0, value=cap.min_wpu_salary_annual,
                                                  step=50000, key=f"min_sal_{position.id}"),
            max_wpu_salary_annual=c2.number_input("Max salary / yr", min_value=0, value=cap.max_wpu_salary_annual,
                                                  step=50000, key=f"max_sal_{position.id}"),
            max_wpu_ctc_annual=c3.number_input("Max CTC / yr (0 = salary cap + benefits)", min_value=0,
                                               value=cap.max_wpu_ctc_annual, step=50000, key=f"max_ctc_{position.id}"),
        )
        p1, p2 = st.columns(2)
        new_premium = PositionPremiumRange(
            min_premium=p1.number_input("Min premium / yr", min_value=0, value=premium.min_premium,
                                        step=10000, key=f"min_prem_{position.id}"),
            max_premium=p2.number_input("Max premium / yr", min_value=0, value=premium.max_premium,
                                        step=10000, key=f"max_prem_{position.id}"),
        )
        if new_cap != cap:
            updated = set_salary_cap(updated, position.id, new_cap)
        if new_premium != premium:
            updated = set_premium_range(updated, position.id, new_premium)

if updated != settings:
    save_settings(updated)
    st.toast("Settings saved")

if st.button("Reset to defaults"):
    reset_settings()
    st.rerun()

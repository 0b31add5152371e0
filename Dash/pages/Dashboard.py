# Faculty Salary Calculator: UGC 7th CPC vs WPU GOA for one position

import streamlit as st
import pandas as pd

from faculty_pay.benefits import Benefits
from faculty_pay.comparison import compare_position, project_position
from faculty_pay.enforcement import typical_premium_warning
from faculty_pay.money import format_currency_inr
from faculty_pay.pay_data import (
    CITY_EXAMPLES,
    DA_HISTORY,
    FACULTY_POSITIONS,
    FINANCIAL_STRATEGIES,
    HRA_RATES,
    NEXT_CPC_YEAR,
    CityType,
    EnforcementMode,
    FinancialStrategy,
)
from faculty_pay.pay_matrix import get_cells_for_level, get_position, suggest_cell_from_experience
from faculty_pay.scenario_log import PostgrestAPIError, build_scenario_row, client_from_secrets, record_scenario
from faculty_pay.session import get_settings, save_settings
from faculty_pay.settings import (
    BASE_MULTIPLIER_RANGE,
    DA_PERCENT_RANGE,
    clear_position_benefits,
    get_benefits_for_position,
    get_benefits_source,
    set_benefits_for_position,
)

st.title("Faculty Salary Calculator")
st.caption("UGC 7th CPC vs WPU GOA Enhanced Compensation")

settings = get_settings()

col1, col2, col3 = st.columns(3)
with col1:
    st.subheader("Position & Experience")
    position_id = st.selectbox(
        "Faculty Position",
        [p.id for p in FACULTY_POSITIONS],
        format_func=lambda pid: get_position(pid).title,
    )
    position = get_position(position_id)
    experience = st.slider("Years of Experience", 0, position.max_experience, 0)
    cells = get_cells_for_level(position.level)
    suggested = suggest_cell_from_experience(position.level, experience)
    cell_index = st.selectbox(
        "Pay Cell",
        list(range(len(cells))),
        index=suggested,
        format_func=lambda i: f"Cell {cells[i]['cell']} - ₹{cells[i]['amount']:,} ({cells[i]['experience']})",
    )
with col2:
    st.subheader("Allowances")
    da_percent = st.number_input("DA (%)", *DA_PERCENT_RANGE, value=float(settings.da_percentage), step=1.0)
    city_options = list(CityType)
    city_type = st.selectbox(
        "City Classification",
        city_options,
        index=city_options.index(settings.city_type),
        format_func=lambda c: f"{HRA_RATES[c]['label']} ({HRA_RATES[c]['rate']}% HRA)",
    )
    st.caption(", ".join(CITY_EXAMPLES[city_type]))
    with st.expander("DA History"):
        st.dataframe(pd.DataFrame(DA_HISTORY), hide_index=True)
with col3:
    st.subheader("WPU Strategy")
    strategy_options = list(FinancialStrategy)
    strategy = st.selectbox(
        "Financial Strategy",
        strategy_options,
        index=strategy_options.index(settings.financial_strategy),
        format_func=lambda s: FINANCIAL_STRATEGIES[s][0],
    )
    st.caption(FINANCIAL_STRATEGIES[strategy][1])
    multiplier = st.slider("Salary Multiplier", *BASE_MULTIPLIER_RANGE, float(settings.base_multiplier), 0.05)
    annual_premium = st.number_input("Annual Premium (₹)", min_value=0, value=int(settings.annual_premium), step=10000)

# --- Benefits (position override > level default > global default) ---
benefits = get_benefits_for_position(settings, position.id, position.level)
source = get_benefits_source(settings, position.id, position.level)
with st.expander(f"Benefits (from {source} defaults)" if source != "position" else "Benefits (custom for this position)"):
    b1, b2, b3, b4, b5 = st.columns(5)
    housing = b1.number_input("Housing / month", min_value=0, value=benefits.housing, step=500)
    professional_dev = b2.number_input("Prof. Development / month", min_value=0, value=benefits.professional_dev, step=500)
    ppf_percent = b3.number_input("PPF (% of basic)", min_value=0.0, value=float(benefits.ppf_percent), step=0.5)
    gratuity_percent = b4.number_input("Gratuity (% of basic)", min_value=0.0, value=float(benefits.gratuity_percent), step=0.01)
    health_insurance = b5.number_input("Health Insurance / month", min_value=0, value=benefits.health_insurance, step=250)
    edited = Benefits(
        housing=housing,
        professional_dev=professional_dev,
        ppf_percent=ppf_percent,
        gratuity_percent=gratuity_percent,
        health_insurance=health_insurance,
    )
    if edited != benefits:
        settings = set_benefits_for_position(settings, position.id, edited)
        save_settings(settings)
        benefits = edited
    if source == "position" and st.button("Reset to level defaults"):
        settings = clear_position_benefits(settings, position.id)
        save_settings(settings)
        st.rerun()

result = compare_position(
    settings,
    position.id,
    cell_index,
    da_percent=da_percent,
    city_type=city_type,
    multiplier=multiplier,
    annual_premium=annual_premium,
    strategy=strategy,
    benefits=benefits,
)
eighth_cpc = project_position(settings, position.id, result, city_type=city_type)
ugc = result.ugc
wpu = result.wpu
enforcement = wpu.enforcement

# --- Results ---
st.subheader("Salary Comparison")
m1, m2, m3 = st.columns(3)
m1.metric("UGC Monthly", format_currency_inr(ugc.total_monthly), f"{format_currency_inr(ugc.total_annual)}/yr", delta_color="off")
m2.metric("WPU CTC Monthly", format_currency_inr(wpu.total_ctc_monthly), f"{format_currency_inr(wpu.total_ctc_annual)}/yr", delta_color="off")
m3.metric("Premium over UGC", format_currency_inr(result.premium_amount_monthly), f"{result.premium_percentage:+.1f}%")

if enforcement.salary_capped:
    st.warning(
        f"WPU salary {format_currency_inr(enforcement.original_salary_annual)}/yr exceeds the position maximum"
        + (" and has been capped." if settings.enforcement_mode == EnforcementMode.HARD else ".")
    )
if enforcement.salary_below_min:
    st.warning("WPU salary is below the position minimum.")
if enforcement.ctc_capped:
    st.warning(f"WPU CTC {format_currency_inr(enforcement.original_ctc_annual)}/yr exceeds the position CTC ceiling.")
if enforcement.premium_below_min or enforcement.premium_above_max:
    st.warning("Annual premium is outside the configured range for this position.")
premium_warning = typical_premium_warning(annual_premium, settings.position_premium_ranges.get(position.id))
if premium_warning:
    st.warning(premium_warning)

breakdown = pd.DataFrame([
    {"Component": "Basic Pay", "UGC": ugc.basic, "WPU GOA": wpu.basic},
    {"Component": f"DA ({da_percent:g}%)", "UGC": ugc.da, "WPU GOA": wpu.da},
    {"Component": f"HRA ({wpu.hra_mode.value})", "UGC": ugc.hra, "WPU GOA": wpu.hra},
    {"Component": "TA", "UGC": ugc.ta, "WPU GOA": wpu.ta},
    {"Component": "Special Allowance", "UGC": ugc.special_allowance, "WPU GOA": wpu.special_allowance},
    {"Component": "Multiplier Bonus", "UGC": 0, "WPU GOA": wpu.multiplier_bonus},
    {"Component": "Premium", "UGC": 0, "WPU GOA": wpu.premium_monthly},
    {"Component": "Total Salary", "UGC": ugc.total_monthly, "WPU GOA": wpu.total_salary_monthly},
    {"Component": "Housing", "UGC": 0, "WPU GOA": wpu.benefits.housing},
    {"Component": "Professional Development", "UGC": 0, "WPU GOA": wpu.benefits.professional_dev},
    {"Component": "PPF", "UGC": 0, "WPU GOA": wpu.benefits.ppf_amount},
    {"Component": "Gratuity", "UGC": 0, "WPU GOA": wpu.benefits.gratuity_amount},
    {"Component": "Health Insurance", "UGC": 0, "WPU GOA": wpu.benefits.health_insurance},
    {"Component": "Total CTC", "UGC": ugc.total_monthly, "WPU GOA": wpu.total_ctc_monthly},
])
view = st.radio("Breakdown", ["Monthly", "Annual"], horizontal=True)
if view == "Annual":
    breakdown[["UGC", "WPU GOA"]] = breakdown[["UGC", "WPU GOA"]] * 12
st.dataframe(breakdown, hide_index=True)

chart_data = breakdown.iloc[[0, 1, 2, 3, 4, 5, 6]].set_index("Component")[["WPU GOA"]]
st.bar_chart(chart_data[chart_data["WPU GOA"] > 0])

# --- 8th CPC Projection ---
st.subheader("8th Pay Commission - Projected Salary")
st.caption(
    f"FF × {settings.eighth_cpc_fitment_factor} · Effective Jan 1, {NEXT_CPC_YEAR} (notional) · "
    f"DA resets to {settings.eighth_cpc_da_percent:g}% · Configure in Settings"
)
e1, e2, e3 = st.columns(3)
e1.metric("8th CPC Basic", format_currency_inr(eighth_cpc.basic))
e2.metric("8th CPC Monthly", format_currency_inr(eighth_cpc.total_monthly), f"{format_currency_inr(eighth_cpc.total_annual)}/yr", delta_color="off")
e3.metric("Over 7th CPC", f"+{eighth_cpc.increment_over_seventh_percent:.1f}%",
          f"{format_currency_inr(eighth_cpc.total_monthly - ugc.total_monthly)}/mo")

# --- Save scenario ---
try:
    client = client_from_secrets(st.secrets)
except FileNotFoundError:
    client = None
if client is not None and st.button("Save Scenario"):
    row = build_scenario_row(
        position, cell_index, da_percent, city_type, multiplier, annual_premium,
        settings.enforcement_mode, result, eighth_cpc,
    )
    try:
        record_scenario(client, row)
        st.success("Scenario saved.")
    except PostgrestAPIError as exc:
        st.error(f"Could not save scenario: {exc.message}")

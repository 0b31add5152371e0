# All Positions Comparison: UGC 7th CPC, projected 8th CPC and WPU GOA side by side

import streamlit as st

from faculty_pay.comparison import compare_all_positions
from faculty_pay.money import format_currency_inr
from faculty_pay.pay_data import FACULTY_POSITIONS
from faculty_pay.session import get_settings

st.title("All Positions Comparison")
st.caption("Side-by-side comparison of UGC 7th CPC, projected 8th CPC, and WPU GOA salary structures "
           "across all faculty positions, each at its entry pay cell.")

settings = get_settings()

default_ids = [p.id for p in FACULTY_POSITIONS if not p.is_principal]
selected_ids = st.multiselect(
    "Positions",
    [p.id for p in FACULTY_POSITIONS],
    default=default_ids,
    format_func=lambda pid: next(p.short_title for p in FACULTY_POSITIONS if p.id == pid),
)
if not selected_ids:
    st.info("Select at least one position to compare.")
    st.stop()

df = compare_all_positions(settings, position_ids=set(selected_ids))

series = ["UGC Annual", "8th CPC Annual", "WPU Salary", "WPU Benefits"]
shown = st.multiselect("Chart series", series, default=series)
if shown:
    st.bar_chart(df.set_index("Position")[shown])

st.subheader("Comparison Table")
st.dataframe(df, hide_index=True)

best = df.loc[df["Premium %"].idxmax()]
st.markdown(
    f"**Largest premium:** {best['Position']} at {best['Premium %']:.1f}% "
    f"({format_currency_inr(best['Premium Annual'])}/yr over UGC)"
)
capped = df[df["Salary Capped"] | df["CTC Capped"]]
if not capped.empty:
    st.warning("Capped by position limits: " + ", ".join(capped["Position"]))

# Bulk Hiring: total cost of a hiring plan under UGC and WPU GOA

import streamlit as st
import pandas as pd

from faculty_pay.hiring import HiringLine, plan_hiring
from faculty_pay.money import format_currency, format_currency_inr
from faculty_pay.pay_data import FACULTY_POSITIONS
from faculty_pay.session import get_settings

st.title("Bulk Hiring")
st.caption("Plan faculty hiring and estimate total costs across UGC and WPU GOA structures.")

settings = get_settings()
titles = {p.id: p.title for p in FACULTY_POSITIONS}

if "hiring_plan" not in st.session_state:
    st.session_state["hiring_plan"] = pd.DataFrame(
        [{"Position": titles[1], "Count": 1, "Experience": 0}]
    )

edited = st.data_editor(
    st.session_state["hiring_plan"],
    num_rows="dynamic",
    hide_index=True,
    column_config={
        "Position": st.column_config.SelectboxColumn("Position", options=list(titles.values()), required=True),
        "Count": st.column_config.NumberColumn("Count", min_value=1, step=1, default=1),
        "Experience": st.column_config.NumberColumn("Experience (yrs)", min_value=0, max_value=40, step=1, default=0),
    },
)
st.session_state["hiring_plan"] = edited

ids_by_title = {title: pid for pid, title in titles.items()}
lines = [
    HiringLine(ids_by_title[row["Position"]], int(row["Count"]), int(row["Experience"]))
    for _, row in edited.dropna(subset=["Position", "Count", "Experience"]).iterrows()
]
if not lines:
    st.info("Add positions and adjust experience/count to calculate total cost")
    st.stop()

plan = plan_hiring(lines, settings)

col1, col2, col3, col4 = st.columns(4)
col1.metric("Faculty", plan.total_count)
col2.metric("UGC Total", format_currency(plan.total_ugc, compact=True))
col3.metric("WPU GOA Total", format_currency(plan.total_wpu_ctc, compact=True))
col4.metric("Premium", format_currency(plan.premium_over_ugc, compact=True), f"{plan.premium_percent:+.1f}%")

st.subheader("Cost by Position")
st.dataframe(plan.lines, hide_index=True)

st.markdown(f"**Average WPU CTC per faculty:** {format_currency_inr(plan.average_ctc)}")
st.markdown(f"**Premium per faculty:** {format_currency_inr(plan.premium_per_faculty)} extra")
verdict = "better than" if plan.premium_over_ugc >= 0 else "below"
st.markdown(f"**{plan.premium_percent:+.1f}% {verdict} UGC standard**")

# Pay Matrix: 7th CPC academic levels and the projected 8th CPC matrix

import streamlit as st
import pandas as pd

from faculty_pay.pay_data import ACADEMIC_LEVELS, BASE_CPC, NEXT_CPC, NEXT_CPC_YEAR, TPTA_CITIES
from faculty_pay.projection import pay_matrix_wide, pay_matrix_with_projection
from faculty_pay.session import get_settings

st.title("UGC Pay Matrix")

settings = get_settings()

fitment_factor = st.slider(
    "8th CPC Fitment Factor", 1.5, 3.5, max(1.5, min(3.5, float(settings.eighth_cpc_fitment_factor))), 0.01
)
pay_matrix_full = pay_matrix_with_projection(fitment_factor)

st.subheader("Academic Levels")
levels = pd.DataFrame([
    {
        "Level": info.level,
        "AGP": info.agp,
        "Pay Band": info.pay_band,
        "Entry Pay": info.entry_pay,
        "Rationalised Entry Pay": info.rationalised_entry_pay,
        "Index of Rationalisation": info.ior,
        "Cells": info.max_cells,
    }
    for info in ACADEMIC_LEVELS
])
st.dataframe(levels, hide_index=True)

# View each CPC matrix
for cpc in [BASE_CPC, NEXT_CPC]:
    label = f"{cpc} Pay Matrix" if cpc == BASE_CPC else f"{cpc} Pay Matrix (projected, Jan {NEXT_CPC_YEAR})"
    st.markdown(f"### {label}")
    st.dataframe(pay_matrix_wide(pay_matrix_full, cpc))

with st.expander("Transport Allowance: TPTA cities"):
    st.write(", ".join(TPTA_CITIES))

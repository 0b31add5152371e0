import streamlit as st

from faculty_pay.logging_config import configure_logging

configure_logging()

st.title("About the WPU GOA Faculty Salary Calculator")

st.markdown("""
## 1. Introduction

This dashboard compares the salary of a faculty member under the **UGC 7th Central Pay
Commission (CPC)** pay matrix with the enhanced compensation offered by **WPU GOA**, and
projects the same salary under a notional **8th CPC** revision.

It covers the eight faculty positions from Assistant Professor (Level 10) to Principal of a
PG college (Level 14), each placed in a pay cell chosen from years of experience.

---

## 2. Data Inputs

- **7th CPC Pay Matrix:**
  Basic pay for each academic level (10, 11, 12, 13A, 14, 15) and pay cell.

- **Allowance Tables:**
  HRA rates by city class (X 30%, Y 20%, Z 10%), transport allowance by level bracket and
  TPTA city status, and the recent DA history.

---

## 3. How the Salary is Built

### A. UGC 7th CPC Salary

- **DA** = Basic × DA%
- **HRA** = Basic × city rate, unless the institution provides housing (then no HRA, or a
  lump sum if configured)
- **TA** = fixed amount for the level bracket, plus DA on that amount
- **Total** = Basic + DA + HRA + TA + special allowance

### B. WPU GOA Salary

- **Method A (multiplier on total UGC):** basic stays at the UGC figure; the uplift is paid as
  a separate multiplier bonus.
- **Method B (multiplier on basic):** basic is multiplied and DA, HRA and TA are recalculated
  on the new basic.
- **Strategy:** multiplier only, premium only, both, or the higher / lower of the multiplier
  and premium results. When the premium path is taken under Method B, basic and allowances
  stay at the UGC values.
- **Benefits:** housing, professional development, PPF and gratuity (as % of basic) and health
  insurance are added to give the **CTC**.

### C. Range Enforcement

Each position can carry minimum and maximum salary, a CTC ceiling, and a premium range.
In **soft** mode values outside the range are flagged; in **hard** mode salary and CTC are
capped at the maximum.

### D. 8th CPC Projection

New Basic = 7th CPC Basic × Fitment Factor. DA restarts at the configured rate and HRA and
TA are recalculated on the new basic.

---

## 4. Pages

- **Dashboard:** single position calculator with the full breakdown.
- **Comparison:** all positions side by side.
- **Bulk Hiring:** total cost of a hiring plan.
- **Pay Matrix:** the 7th CPC matrix and the projected 8th CPC matrix.
- **Settings:** the policy knobs shared by every page, saved between sessions.

---

## 5. Key Assumptions

- All figures are pre-tax, monthly unless marked annual, rounded to the nearest rupee at every
  step.
- Level 13A is treated as level 13 for transport allowance.
""")

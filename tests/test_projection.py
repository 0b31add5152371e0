import pytest

from faculty_pay.pay_data import PAY_MATRIX, CityType, HraMode
from faculty_pay.projection import (
    calculate_8th_cpc_salary,
    pay_matrix_wide,
    pay_matrix_with_projection,
    project_pay_matrix,
)


class TestEighthCPCSalary:

    def test_fitment_on_entry_basic(self):
        eighth = calculate_8th_cpc_salary(57700, 2.28, 0, CityType.Y, "10", seventh_total_monthly=108394)
        assert eighth.basic == 131556
        assert eighth.da == 0
        assert eighth.hra == 26311
        assert eighth.hra_mode == HraMode.PERCENT
        assert eighth.ta == 3600
        assert eighth.total_monthly == 161467
        assert eighth.total_annual == 161467 * 12
        assert eighth.increment_over_seventh_percent == pytest.approx((161467 - 108394) / 108394 * 100)

    def test_next_cycle_da_applies_to_ta(self):
        eighth = calculate_8th_cpc_salary(57700, 2.28, 10, CityType.Y, "10")
        assert eighth.da == 13156
        assert eighth.ta == 3600 + 360

    def test_special_allowance_carried(self):
        eighth = calculate_8th_cpc_salary(144200, 2.28, 0, CityType.X, "14", special_allowance=3000)
        assert eighth.total_monthly == eighth.basic + eighth.hra + eighth.ta + 3000

    def test_zero_current_total_guarded(self):
        eighth = calculate_8th_cpc_salary(57700, 2.28, 0, CityType.Y, "10")
        assert eighth.increment_over_seventh_percent == 0


class TestPayMatrixProjection:

    def test_projected_values(self):
        projected = project_pay_matrix(2.28)
        assert set(projected["CPC"]) == {"8CPC"}
        level_15 = projected[projected["Level"] == "15"].sort_values("Pay_Position")
        assert level_15["Basic_Pay"].tolist()[0] == 415416
        assert level_15["Basic_Pay"].tolist()[-1] == 510948

    def test_projection_keeps_ladder_increasing(self):
        projected = project_pay_matrix(2.57)
        for level in PAY_MATRIX:
            pays = projected[projected["Level"] == level].sort_values("Pay_Position")["Basic_Pay"].tolist()
            assert all(a < b for a, b in zip(pays, pays[1:]))

    def test_combined_and_wide(self):
        full = pay_matrix_with_projection(2.28)
        assert set(full["CPC"]) == {"7CPC", "8CPC"}
        wide = pay_matrix_wide(full, "8CPC")
        assert list(wide.columns) == ["10", "11", "12", "13A", "14", "15"]
        assert len(wide) == 40
        assert wide.loc[1, "10"] == 131556
        assert wide["15"].isna().sum() == 32

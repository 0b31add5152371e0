import pytest

from faculty_pay.baseline import HraConfig
from faculty_pay.comparison import calculate_comparison, compare_all_positions, compare_position, project_position
from faculty_pay.enforcement import PositionSalaryCap
from faculty_pay.pay_data import CityType, EnforcementMode, FinancialStrategy, HraMode, MultiplierMethod
from faculty_pay.pay_matrix import UnknownPositionError
from faculty_pay.settings import PolicySettings, set_salary_cap, update_settings


def compare(benefits, strategy=FinancialStrategy.MULTIPLIER, **kwargs):
    return calculate_comparison("10", 0, 58, CityType.Y, 1.3, 300000, strategy, MultiplierMethod.METHOD_A,
                                benefits, **kwargs)


class TestCalculateComparison:

    def test_reference_scenario(self, no_benefits):
        result = compare(no_benefits)
        assert result.ugc.total_monthly == 108394
        assert result.wpu.total_salary_monthly == 140912
        assert result.premium_amount_monthly == 140912 - 108394
        assert result.premium_percentage == pytest.approx(32518 / 108394 * 100)

    def test_annual_premium_is_monthly_times_twelve(self, global_benefits):
        for strategy in FinancialStrategy:
            result = compare(global_benefits, strategy)
            assert result.premium_amount_annual == result.premium_amount_monthly * 12

    def test_premium_measured_against_ctc(self, global_benefits):
        result = compare(global_benefits)
        assert result.premium_amount_monthly == 140912 + 55532 - 108394

    def test_baseline_ignores_housing_config(self, no_benefits):
        result = compare(no_benefits, hra_config=HraConfig())
        assert result.ugc.hra == 11540
        assert result.ugc.hra_mode == HraMode.PERCENT
        assert result.wpu.hra == 0

    def test_zero_baseline_guards_percentage(self, global_benefits):
        # out-of-range cell gives basic 0; special allowance cancels the TA
        result = calculate_comparison("10", 99, 58, CityType.Y, 1.3, 300000, FinancialStrategy.BOTH,
                                      MultiplierMethod.METHOD_A, global_benefits, special_allowance=-5688)
        assert result.ugc.total_monthly == 0
        assert result.wpu.total_ctc_monthly > 0
        assert result.premium_percentage == 0

    @pytest.mark.parametrize("level", ["13B", ""])
    def test_unknown_level_gives_zero_basic(self, no_benefits, level):
        result = calculate_comparison(level, 0, 58, CityType.Y, 1.3, 300000, FinancialStrategy.MULTIPLIER,
                                      MultiplierMethod.METHOD_A, no_benefits)
        assert result.ugc.basic == 0
        assert result.wpu.total_salary_monthly > 0

    def test_hard_cap_scenario(self, no_benefits):
        cap = PositionSalaryCap(max_wpu_salary_annual=1500000)
        result = compare(no_benefits, enforcement_mode=EnforcementMode.HARD, salary_cap=cap)
        assert result.wpu.enforcement.salary_capped
        assert result.wpu.total_salary_annual == 1500000
        assert result.premium_amount_monthly == 125000 - 108394


class TestComparePosition:

    def test_defaults_for_entry_assistant_professor(self):
        result = compare_position(PolicySettings(), 1, 0)
        # default policy provides housing, so WPU pays no HRA
        assert result.wpu.hra == 0
        assert result.wpu.multiplier_bonus == 29056
        assert result.wpu.total_salary_monthly == 125910
        assert result.wpu.benefits.total_monthly == 55532
        assert result.wpu.total_ctc_monthly == 181442
        assert result.premium_amount_monthly == 181442 - 108394
        assert not result.wpu.enforcement.has_violation

    def test_principal_special_allowance(self):
        result = compare_position(PolicySettings(), 7, 0)
        assert result.ugc.special_allowance == 2000
        assert result.wpu.special_allowance == 2000

    def test_overrides_replace_settings(self):
        result = compare_position(PolicySettings(), 1, 0, strategy="premium", annual_premium=600000)
        assert result.wpu.total_salary_monthly == 108394 + 50000

    def test_uses_position_salary_cap(self):
        settings = update_settings(PolicySettings(), enforcement_mode=EnforcementMode.HARD)
        settings = set_salary_cap(settings, 1, PositionSalaryCap(max_wpu_salary_annual=1200000))
        result = compare_position(settings, 1, 0)
        assert result.wpu.enforcement.salary_capped
        assert result.wpu.total_salary_monthly == 100000

    def test_unknown_position(self):
        with pytest.raises(UnknownPositionError):
            compare_position(PolicySettings(), 99, 0)

    def test_projection_for_position(self):
        settings = PolicySettings()
        result = compare_position(settings, 1, 0)
        eighth = project_position(settings, 1, result)
        assert eighth.basic == 131556
        # default housing config drops HRA, DA restarts at 0
        assert eighth.total_monthly == 131556 + 3600
        assert eighth.increment_over_seventh_percent == pytest.approx((135156 - 108394) / 108394 * 100)


class TestCompareAllPositions:

    def test_one_row_per_position(self):
        df = compare_all_positions(PolicySettings())
        assert len(df) == 8
        assert {"UGC Annual", "8th CPC Annual", "WPU Salary", "WPU Benefits", "Premium %"} <= set(df.columns)

    def test_filter_and_values(self):
        df = compare_all_positions(PolicySettings(), position_ids={1})
        row = df.iloc[0]
        assert row["Position"] == "Asst Prof (L10)"
        assert row["UGC Annual"] == 1300728
        assert row["WPU CTC"] == 181442 * 12
        assert row["Premium Annual"] == (181442 - 108394) * 12
        assert row["Premium %"] == round((181442 - 108394) / 108394 * 100, 1)

    def test_empty_selection(self):
        assert compare_all_positions(PolicySettings(), position_ids=set()).empty

import pytest
from pydantic import ValidationError

from faculty_pay.baseline import HraConfig, calculate_da, calculate_hra, calculate_ta, calculate_ugc_salary
from faculty_pay.pay_data import CityType, HraMode


class TestDearnessAllowance:

    def test_reference_value(self):
        assert calculate_da(57700, 58) == 33466

    def test_rounds_half_up(self):
        assert calculate_da(25, 50) == 13
        assert calculate_da(75010, 58) == 43506

    def test_zero(self):
        assert calculate_da(0, 58) == 0
        assert calculate_da(57700, 0) == 0


class TestHouseRentAllowance:

    @pytest.mark.parametrize("city,expected", [(CityType.X, 17310), (CityType.Y, 11540), (CityType.Z, 5770)])
    def test_percent_by_city(self, city, expected):
        assert calculate_hra(57700, city) == (expected, HraMode.PERCENT)

    def test_accepts_plain_city_string(self):
        assert calculate_hra(57700, "Y").amount == 11540

    def test_none_is_not_a_configurable_mode(self):
        with pytest.raises(ValidationError):
            HraConfig(hra_mode=HraMode.NONE)
        with pytest.raises(ValidationError):
            HraConfig(hra_mode="none")
        assert HraConfig(hra_mode="lumpsum").hra_mode == HraMode.LUMPSUM

    def test_housing_without_hra(self):
        config = HraConfig(providing_housing=True, still_provide_hra=False)
        assert calculate_hra(57700, CityType.X, config) == (0, HraMode.NONE)

    def test_housing_with_hra_lumpsum(self):
        config = HraConfig(providing_housing=True, still_provide_hra=True, hra_mode=HraMode.LUMPSUM,
                           lump_sum_value=15000)
        assert calculate_hra(57700, CityType.X, config) == (15000, HraMode.LUMPSUM)

    def test_no_housing_lumpsum(self):
        config = HraConfig(providing_housing=False, hra_mode=HraMode.LUMPSUM, lump_sum_value=9000)
        assert calculate_hra(57700, CityType.Z, config) == (9000, HraMode.LUMPSUM)

    def test_no_housing_percent(self):
        config = HraConfig(providing_housing=False, hra_mode=HraMode.PERCENT)
        assert calculate_hra(57700, CityType.Y, config) == (11540, HraMode.PERCENT)


class TestTransportAllowance:

    def test_level_9_plus_other_city(self):
        assert calculate_ta("10", 58) == 3600 + 2088

    def test_level_9_plus_tpta_city(self):
        assert calculate_ta("15", 58, is_tpta_city=True) == 7200 + 4176

    def test_13a_uses_level_13_bracket(self):
        assert calculate_ta("13A", 0) == 3600

    @pytest.mark.parametrize("level,tpta,base", [
        ("5", False, 1800), ("3", True, 3600), ("2", False, 900), ("1", True, 1350),
    ])
    def test_lower_brackets(self, level, tpta, base):
        assert calculate_ta(level, 0, tpta) == base

    def test_unknown_levels_do_not_raise(self):
        assert calculate_ta("13B", 0) == 3600
        assert calculate_ta("", 0) == 900
        assert calculate_ta("", 0, is_tpta_city=True) == 1350


class TestUGCSalary:

    def test_reference_breakdown(self, ugc_level_10):
        assert ugc_level_10.basic == 57700
        assert ugc_level_10.da == 33466
        assert ugc_level_10.hra == 11540
        assert ugc_level_10.hra_mode == HraMode.PERCENT
        assert ugc_level_10.ta == 5688
        assert ugc_level_10.special_allowance == 0
        assert ugc_level_10.total_monthly == 108394
        assert ugc_level_10.total_annual == 1300728

    def test_special_allowance_added_to_total(self):
        ugc = calculate_ugc_salary(131400, 58, CityType.Y, "13A", special_allowance=2000)
        assert ugc.total_monthly == ugc.basic + ugc.da + ugc.hra + ugc.ta + 2000

    def test_housing_config_removes_hra(self):
        ugc = calculate_ugc_salary(57700, 58, CityType.Y, "10", hra_config=HraConfig())
        assert ugc.hra == 0
        assert ugc.hra_mode == HraMode.NONE
        assert ugc.total_monthly == 108394 - 11540

    def test_unknown_cell_basic_zero(self):
        ugc = calculate_ugc_salary(0, 58, CityType.Y, "10")
        assert ugc.total_monthly == ugc.ta == 5688

    @pytest.mark.parametrize("level,ta", [("13B", 3600 + 2088), ("", 900 + 522)])
    def test_unknown_level_still_computes(self, level, ta):
        ugc = calculate_ugc_salary(0, 58, CityType.Y, level)
        assert ugc.basic == 0
        assert ugc.total_monthly == ugc.ta == ta

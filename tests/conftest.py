import pytest

from faculty_pay.baseline import calculate_ugc_salary
from faculty_pay.benefits import Benefits
from faculty_pay.pay_data import CityType


@pytest.fixture
def global_benefits():
    return Benefits(housing=36250, professional_dev=8333, ppf_percent=12, gratuity_percent=4.81,
                    health_insurance=1250)


@pytest.fixture
def no_benefits():
    return Benefits()


@pytest.fixture
def ugc_level_10():
    """Level 10, first cell, DA 58%, Y city: the reference assistant professor."""
    return calculate_ugc_salary(57700, 58, CityType.Y, "10")

from faculty_pay.baseline import calculate_da, calculate_hra, calculate_ta, calculate_ugc_salary
from faculty_pay.benefits import Benefits, calculate_benefits
from faculty_pay.comparison import ComparisonResult, calculate_comparison, compare_all_positions, compare_position
from faculty_pay.enhanced import calculate_wpu_salary
from faculty_pay.projection import calculate_8th_cpc_salary
from faculty_pay.settings import PolicySettings, SettingsStore

__version__ = "0.1.0"

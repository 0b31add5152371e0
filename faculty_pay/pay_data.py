# UGC 7th CPC reference tables for academic pay levels 10 to 15.

from dataclasses import dataclass
from enum import Enum
from typing import Optional

import pandas as pd

BASE_CPC = '7CPC'
NEXT_CPC = '8CPC'
NEXT_CPC_YEAR = 2026


class CityType(str, Enum):
    X = "X"
    Y = "Y"
    Z = "Z"


class FinancialStrategy(str, Enum):
    MULTIPLIER = "multiplier"
    PREMIUM = "premium"
    BOTH = "both"
    HIGHER = "higher"
    LOWER = "lower"


class MultiplierMethod(str, Enum):
    # A: multiplier on total UGC salary, B: multiplier on basic pay
    METHOD_A = "methodA"
    METHOD_B = "methodB"


class HraMode(str, Enum):
    PERCENT = "percent"
    LUMPSUM = "lumpsum"
    NONE = "none"


class EnforcementMode(str, Enum):
    SOFT = "soft"
    HARD = "hard"


@dataclass(frozen=True)
class AcademicLevel:
    level: str
    agp: Optional[int]
    pay_band: str
    entry_pay: int
    rationalised_entry_pay: int
    ior: float
    max_cells: int


@dataclass(frozen=True)
class FacultyPosition:
    id: int
    title: str
    short_title: str
    level: str
    agp: Optional[int]
    special_allowance: int
    typical_experience: str
    min_experience: int
    max_experience: int

    @property
    def is_principal(self):
        return "principal" in self.title.lower()


ACADEMIC_LEVELS = [
    AcademicLevel("10", 6000, "15,600-39,100", 21600, 57700, 2.67, 40),
    AcademicLevel("11", 7000, "15,600-39,100", 25790, 68900, 2.67, 38),
    AcademicLevel("12", 8000, "15,600-39,100", 29900, 79800, 2.67, 34),
    AcademicLevel("13A", 9000, "37,400-67,000", 49200, 131400, 2.67, 18),
    AcademicLevel("14", 10000, "37,400-67,000", 53000, 144200, 2.72, 15),
    AcademicLevel("15", None, "67,000-79,000", 67000, 182200, 2.72, 8),
]

PAY_MATRIX = {
    "10": [
        57700, 59400, 61200, 63000, 64900, 66800, 68800, 70900,
        73000, 75200, 77500, 79800, 82200, 84700, 87200, 89800,
        92500, 95300, 98200, 101100, 104100, 107200, 110400, 113700,
        117100, 120600, 124200, 127900, 131700, 135700, 139800, 144000,
        148300, 152700, 157300, 162000, 166900, 171900, 177100, 182400,
    ],
    "11": [
        68900, 71000, 73100, 75300, 77600, 79900, 82300, 84800,
        87300, 89900, 92600, 95400, 98300, 101200, 104200, 107300,
        110500, 113800, 117200, 120700, 124300, 128000, 131800, 135800,
        139900, 144100, 148400, 152900, 157500, 162200, 167100, 172100,
        177300, 182600, 188100, 193700, 199500, 205500,
    ],
    "12": [
        79800, 82200, 84100, 87200, 89800, 92500, 95300, 98200,
        101100, 104100, 107200, 110400, 113700, 117100, 120600, 124200,
        127900, 131700, 135700, 139800, 144000, 148300, 152700, 157300,
        162000, 166900, 171900, 177100, 182400, 187900, 193500, 199300,
        205300, 211500,
    ],
    "13A": [
        131400, 135300, 139400, 143600, 147900, 152300, 156900, 161600,
        166400, 171400, 176500, 181800, 187300, 192900, 198700, 204100,
        210800, 217100,
    ],
    "14": [
        144200, 148500, 153000, 157600, 162300, 167200, 172200, 177400,
        182100, 188200, 193800, 199600, 205600, 211800, 218200,
    ],
    "15": [
        182200, 187700, 193300, 199100, 205100, 211300, 217600, 224100,
    ],
}

FACULTY_POSITIONS = [
    FacultyPosition(1, "Assistant Professor (Entry Level)", "Asst Prof (L10)", "10", 6000, 0, "0-4 years", 0, 39),
    FacultyPosition(2, "Assistant Professor (Senior Scale)", "Asst Prof (L11)", "11", 7000, 0, "4-8 years", 0, 37),
    FacultyPosition(3, "Assistant Professor (Selection Grade)", "Asst Prof (L12)", "12", 8000, 0, "8-12 years", 0, 33),
    FacultyPosition(4, "Associate Professor", "Assoc Prof (L13A)", "13A", 9000, 0, "12-15 years", 0, 17),
    FacultyPosition(5, "Professor", "Prof (L14)", "14", 10000, 0, "15-20 years", 0, 14),
    FacultyPosition(6, "Professor (HAG Scale)", "Prof HAG (L15)", "15", None, 0, "20+ years", 0, 7),
    FacultyPosition(7, "Principal (UG College)", "Principal UG", "13A", 9000, 2000, "12-15 years", 0, 17),
    FacultyPosition(8, "Principal (PG College)", "Principal PG", "14", 10000, 3000, "15-20 years", 0, 14),
]

HRA_RATES = {
    CityType.X: {"rate": 30, "label": "X-Class City", "population": "50 Lakhs and above"},
    CityType.Y: {"rate": 20, "label": "Y-Class City", "population": "5 to 50 Lakhs"},
    CityType.Z: {"rate": 10, "label": "Z-Class City", "population": "Below 5 Lakhs"},
}

CITY_EXAMPLES = {
    CityType.X: ["Ahmedabad", "Bengaluru", "Chennai", "Delhi", "Hyderabad", "Kolkata", "Mumbai", "Pune"],
    CityType.Y: ["Agra", "Goa (Panaji/Margao)", "Jaipur", "Lucknow", "Chandigarh", "Indore", "Bhopal", "Kochi",
                 "Mangaluru", "Mysuru", "Nashik", "Surat", "Vadodara", "Varanasi"],
    CityType.Z: ["All other cities and towns"],
}

# Transport allowance base, before DA, by level bracket.
TA_RATES = {
    "level9Plus": {"tpta_city": 7200, "other_city": 3600},
    "level3to8": {"tpta_city": 3600, "other_city": 1800},
    "level1to2": {"tpta_city": 1350, "other_city": 900},
}

TPTA_CITIES = [
    "Hyderabad", "Patna", "Delhi", "Ahmedabad", "Surat", "Bangalore",
    "Kochi", "Kozhikode", "Indore", "Mumbai", "Nagpur", "Pune",
    "Jaipur", "Chennai", "Coimbatore", "Ghaziabad", "Kanpur", "Lucknow", "Kolkata",
]

DA_HISTORY = [
    {"date": "Jul 2025", "rate": 58, "label": "Current"},
    {"date": "Jan 2025", "rate": 55, "label": ""},
    {"date": "Jul 2024", "rate": 53, "label": ""},
    {"date": "Jan 2024", "rate": 50, "label": ""},
    {"date": "Jul 2023", "rate": 46, "label": ""},
    {"date": "Jan 2023", "rate": 42, "label": ""},
    {"date": "Jul 2022", "rate": 38, "label": ""},
    {"date": "Jan 2022", "rate": 34, "label": ""},
]

FINANCIAL_STRATEGIES = {
    FinancialStrategy.MULTIPLIER: ("Multiplier Only", "Apply salary multiplier without annual premium"),
    FinancialStrategy.PREMIUM: ("Premium Only", "Add annual premium without multiplier enhancement"),
    FinancialStrategy.BOTH: ("Multiplier + Premium", "Apply both multiplier and annual premium together"),
    FinancialStrategy.HIGHER: ("Higher of Both", "Compare multiplier vs premium result, use higher value"),
    FinancialStrategy.LOWER: ("Lower of Both", "Compare multiplier vs premium result, use lower value"),
}

MULTIPLIER_METHODS = {
    MultiplierMethod.METHOD_A: (
        "Method A: Multiplier on Total UGC",
        "Keeps basic pay constant at UGC standard",
        "Multiplier is applied to the total UGC salary (Basic + DA + HRA + TA), not the basic pay. "
        "Basic stays at the UGC figure, which keeps future liability for WPU GOA lower.",
    ),
    MultiplierMethod.METHOD_B: (
        "Method B: Multiplier on Basic Pay",
        "Traditional method - increases basic pay",
        "Multiplier is applied directly to the basic pay. DA, HRA and TA are then recalculated on the "
        "new basic, so every allowance scales with the enhanced basic.",
    ),
}


def load_pay_matrix():
    """Long-format 7th CPC pay matrix: one row per (Level, Pay_Position)."""
    rows = []
    for level, cells in PAY_MATRIX.items():
        for idx, amount in enumerate(cells):
            rows.append({"Level": level, "Pay_Position": idx + 1, "Basic_Pay": amount})
    pay_matrix = pd.DataFrame(rows)
    pay_matrix['CPC'] = BASE_CPC
    return pay_matrix

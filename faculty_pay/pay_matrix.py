import re

from faculty_pay.pay_data import ACADEMIC_LEVELS, FACULTY_POSITIONS, PAY_MATRIX

_LEADING_DIGITS = re.compile(r"\s*(\d+)")


class UnknownPositionError(LookupError):
    """Raised when a position id is not in the faculty position catalog."""


def get_cell_amount(level, cell_index):
    cells = PAY_MATRIX.get(level)
    if not cells or cell_index < 0 or cell_index >= len(cells):
        return 0
    return cells[cell_index]


def get_cells_for_level(level):
    cells = PAY_MATRIX.get(level)
    if not cells:
        return []
    return [
        {
            "cell": idx + 1,
            "amount": amount,
            "experience": f"{idx} yr{'s' if idx != 1 else ''} exp",
        }
        for idx, amount in enumerate(cells)
    ]


def suggest_cell_from_experience(level, years_of_experience):
    cells = PAY_MATRIX.get(level)
    if not cells:
        return 0
    return max(0, min(years_of_experience, len(cells) - 1))


def get_level_info(level):
    return next((info for info in ACADEMIC_LEVELS if info.level == level), None)


def get_position(position_id):
    for position in FACULTY_POSITIONS:
        if position.id == position_id:
            return position
    raise UnknownPositionError(f"No faculty position with id {position_id}")


def level_number(level):
    # leading digits only, so 13A brackets like 13; no digits falls to the lowest bracket
    match = _LEADING_DIGITS.match(str(level))
    return int(match.group(1)) if match else 0

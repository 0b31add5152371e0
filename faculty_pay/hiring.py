# Bulk hiring cost estimate across UGC and WPU GOA structures.

from dataclasses import dataclass, field
from typing import Optional

import pandas as pd

from faculty_pay.comparison import compare_position
from faculty_pay.pay_matrix import get_position, suggest_cell_from_experience
from faculty_pay.settings import PolicySettings


@dataclass
class HiringLine:
    position_id: int
    count: int = 1
    experience: int = 0
    cell_index: Optional[int] = None

    def resolved_cell(self):
        if self.cell_index is not None:
            return self.cell_index
        return suggest_cell_from_experience(get_position(self.position_id).level, self.experience)


@dataclass(frozen=True)
class HiringPlan:
    lines: pd.DataFrame = field(repr=False)
    total_count: int
    total_ugc: int
    total_wpu_ctc: int
    premium_over_ugc: int
    premium_percent: float

    @property
    def average_ctc(self):
        return self.total_wpu_ctc / self.total_count if self.total_count > 0 else 0

    @property
    def premium_per_faculty(self):
        return self.premium_over_ugc / self.total_count if self.total_count > 0 else 0


def plan_hiring(lines, settings: PolicySettings) -> HiringPlan:
    records = []
    for line in lines:
        position = get_position(line.position_id)
        cell_index = line.resolved_cell()
        result = compare_position(settings, position.id, cell_index)
        records.append({
            "Position": position.short_title,
            "Count": line.count,
            "Experience": line.experience,
            "Cell": cell_index + 1,
            "UGC Annual": result.ugc.total_annual,
            "WPU CTC Annual": result.wpu.total_ctc_annual,
            "UGC Total": result.ugc.total_annual * line.count,
            "WPU CTC Total": result.wpu.total_ctc_annual * line.count,
        })
    df = pd.DataFrame(
        records,
        columns=["Position", "Count", "Experience", "Cell", "UGC Annual", "WPU CTC Annual",
                 "UGC Total", "WPU CTC Total"],
    )

    total_count = int(df["Count"].sum())
    total_ugc = int(df["UGC Total"].sum())
    total_wpu_ctc = int(df["WPU CTC Total"].sum())
    premium_over_ugc = total_wpu_ctc - total_ugc
    premium_percent = premium_over_ugc / total_ugc * 100 if total_ugc > 0 else 0.0
    return HiringPlan(
        lines=df,
        total_count=total_count,
        total_ugc=total_ugc,
        total_wpu_ctc=total_wpu_ctc,
        premium_over_ugc=premium_over_ugc,
        premium_percent=premium_percent,
    )

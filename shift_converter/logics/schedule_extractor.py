"""
Schedule extraction: master schedule grid -> (date, employee ID, task code) records.

Master grid layout:
    row 0         header (skipped)
    column A      employee display name
    column N      shift code for day N of the target month
"""

import logging
from dataclasses import dataclass, asdict
from typing import Dict, List, Mapping, Sequence

from shift_converter.logics.shift_classifier import (
    classify_shift,
    cell_to_text,
    days_in_month,
    format_date
)
from shift_converter.logics.task_code_resolver import TaskCodeSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutputRecord:
    date: str
    employeeId: str
    taskCode: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def extract_schedule(
    master_grid: Sequence[Sequence],
    employee_mapping: Mapping[str, str],
    task_codes: TaskCodeSet,
    year: int,
    month: int,
    early_cutoff: str,
    late_cutoff: str
) -> List[OutputRecord]:
    """
    Turn every shift cell of the master grid into an OutputRecord.

    Records are emitted employee by employee, days ascending. Cells that are
    not shift codes are skipped. Names missing from the mapping are used as
    their own ID.
    """
    month_days = days_in_month(year, month)
    records: List[OutputRecord] = []

    for row in master_grid[1:]:
        employee_name = cell_to_text(row[0]) if len(row) > 0 else ""
        if not employee_name:
            continue

        employee_id = employee_mapping.get(employee_name) or employee_name

        for day in range(1, min(month_days, len(row) - 1) + 1):
            bucket = classify_shift(row[day], early_cutoff, late_cutoff)
            if bucket is None:
                continue

            records.append(OutputRecord(
                date=format_date(year, month, day),
                employeeId=employee_id,
                taskCode=task_codes.code_for(bucket)
            ))

    return records

"""
Conversion entry points used by the API layer.

convert() ties the resolvers and the extractor together and turns a missing
master sheet into a structured failure. build_download_grid() lays out
records for the result workbook.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from shift_converter.logics.employee_resolver import resolve_employee_mapping
from shift_converter.logics.exceptions import (
    MasterSheetNotFoundException,
    MalformedOutputRequestException
)
from shift_converter.logics.schedule_extractor import OutputRecord, extract_schedule
from shift_converter.logics.sheet_io import Grid
from shift_converter.logics.task_code_resolver import default_task_codes, resolve_task_codes
from shift_converter.settings import MASTER_SHEET_NAME

logger = logging.getLogger(__name__)

DOWNLOAD_HEADER = ["日期", "工號", "任務代碼"]
RECORD_FIELDS = ("date", "employeeId", "taskCode")


def convert(
    master_grid: Optional[Grid],
    employee_lookup_grid: Optional[Grid],
    task_code_lookup_grid: Optional[Grid],
    year: int,
    month: int,
    early_cutoff: str,
    late_cutoff: str,
    master_sheet_name: str = MASTER_SHEET_NAME
) -> Dict[str, Any]:
    """
    Convert a decoded master schedule into output records.

    A None lookup grid means the sheet could not be obtained: employees then
    map to their own names and task codes fall back to the marker defaults.

    Returns:
        {"success": True, "records": [OutputRecord, ...]} or the structured
        error dict when the master grid is missing
    """
    if master_grid is None:
        logger.error(f"Master sheet '{master_sheet_name}' is missing")
        return MasterSheetNotFoundException(master_sheet_name).to_dict()

    if employee_lookup_grid is None:
        employee_mapping = {}
    else:
        employee_mapping = resolve_employee_mapping(employee_lookup_grid)

    if task_code_lookup_grid is None:
        task_codes = default_task_codes()
    else:
        task_codes = resolve_task_codes(task_code_lookup_grid)

    logger.info(f"Processing for {year}-{month}")
    records = extract_schedule(
        master_grid,
        employee_mapping,
        task_codes,
        year,
        month,
        early_cutoff,
        late_cutoff
    )
    logger.info(f"Converted {len(records)} entries")

    return {"success": True, "records": records}


def _record_row(record: Any) -> List[str]:
    if isinstance(record, OutputRecord):
        return [record.date, record.employeeId, record.taskCode]
    if isinstance(record, Mapping):
        return ["" if record.get(field) is None else str(record.get(field)) for field in RECORD_FIELDS]
    raise MalformedOutputRequestException(f"Record is not an object: {record!r}")


def build_download_grid(records: Any) -> Grid:
    """
    Header row followed by one row per record, in input order.

    Raises:
        MalformedOutputRequestException: records is not a list of records
    """
    if not isinstance(records, (list, tuple)):
        raise MalformedOutputRequestException(
            f"Expected a list of records, got {type(records).__name__}"
        )

    return [list(DOWNLOAD_HEADER)] + [_record_row(record) for record in records]

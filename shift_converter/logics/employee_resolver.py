"""Employee name -> employee ID mapping from the employee lookup sheet."""

import logging
from typing import Dict, Sequence

from shift_converter.logics.shift_classifier import cell_to_text

logger = logging.getLogger(__name__)


def resolve_employee_mapping(lookup_grid: Sequence[Sequence]) -> Dict[str, str]:
    """
    Build the name -> ID mapping.

    Column A holds the display name and column B the employee ID; row 0 is a
    header. Rows missing either value are skipped. A repeated name keeps the
    ID from its last row.
    """
    mapping: Dict[str, str] = {}

    for row_index, row in enumerate(lookup_grid):
        if row_index == 0:
            continue

        name = cell_to_text(row[0]) if len(row) > 0 else ""
        employee_id = cell_to_text(row[1]) if len(row) > 1 else ""
        if not name or not employee_id:
            continue

        if name in mapping and mapping[name] != employee_id:
            logger.warning(
                f"Duplicate employee name '{name}' in lookup sheet (row {row_index + 1}): "
                f"replacing {mapping[name]} with {employee_id}"
            )
        mapping[name] = employee_id

    logger.info(f"Employee mapping loaded: {len(mapping)} entries")
    return mapping

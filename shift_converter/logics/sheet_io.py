"""
Spreadsheet I/O helpers.

Everything downstream works on a grid: a list of rows, each a list of cell
strings, with row 0 first and "" for unset cells.
"""

import csv
import logging
from io import BytesIO, StringIO
from typing import List, Sequence

import pandas as pd

from shift_converter.logics.exceptions import (
    InvalidWorkbookException,
    MasterSheetNotFoundException
)
from shift_converter.logics.shift_classifier import cell_to_text

logger = logging.getLogger(__name__)

Grid = List[List[str]]

RESULT_COLUMN_WIDTHS = (12, 15, 20)


def dataframe_to_grid(df: pd.DataFrame) -> Grid:
    """Convert a header-less DataFrame into a grid of trimmed strings."""
    return [
        ["" if pd.isna(value) else cell_to_text(value) for value in row]
        for row in df.itertuples(index=False, name=None)
    ]


def read_sheet_grid(contents: bytes, sheet_name: str) -> Grid:
    """
    Decode one named sheet of an uploaded workbook.

    Raises:
        InvalidWorkbookException: The bytes are not a readable workbook
        MasterSheetNotFoundException: The workbook has no sheet named sheet_name
    """
    try:
        workbook = pd.ExcelFile(BytesIO(contents), engine="openpyxl")
    except Exception as e:
        logger.error(f"Unable to open uploaded workbook: {e}")
        raise InvalidWorkbookException(str(e)) from e

    with workbook:
        if sheet_name not in workbook.sheet_names:
            logger.warning(f"Sheet '{sheet_name}' not found; available: {workbook.sheet_names}")
            raise MasterSheetNotFoundException(sheet_name, list(workbook.sheet_names))

        df = workbook.parse(sheet_name, header=None, dtype=object, keep_default_na=False)

    grid = dataframe_to_grid(df)
    logger.debug(f"Decoded sheet '{sheet_name}': {len(grid)} rows")
    return grid


def parse_csv_grid(csv_text: str) -> Grid:
    """
    Tokenize CSV text into a grid.

    Blank lines are skipped and every cell is trimmed. Quoted fields may
    contain commas, and rows keep their own length.
    """
    if not csv_text or not csv_text.strip():
        return []

    grid = []
    for row in csv.reader(StringIO(csv_text), skipinitialspace=True):
        if len(row) <= 1 and not "".join(row).strip():
            continue
        grid.append([cell.strip() for cell in row])
    return grid


def write_grid_xlsx(grid: Sequence[Sequence], sheet_title: str) -> BytesIO:
    """
    Write a grid (row 0 = header) into a single-sheet workbook.

    Returns:
        BytesIO: Excel file stream positioned at the start
    """
    header = list(grid[0]) if grid else []
    df = pd.DataFrame([list(row) for row in grid[1:]], columns=header)

    output = BytesIO()
    with pd.ExcelWriter(output, engine="xlsxwriter") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_title)

        ws = writer.sheets[sheet_title]
        for c_idx, width in enumerate(RESULT_COLUMN_WIDTHS):
            ws.set_column(c_idx, c_idx, width)

    output.seek(0)
    return output

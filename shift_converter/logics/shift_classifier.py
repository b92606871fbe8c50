"""
Shift classification for schedule cells.

A schedule cell holds a shift start code such as "930" or "1150". Codes are
compared as plain integers against the early and late cutoffs to place the
shift into a bucket:

    value <= early_cutoff  -> early
    value >= late_cutoff   -> late
    otherwise              -> middle

The early check runs first, so an inverted cutoff pair still classifies
deterministically.
"""

import calendar
import re
from typing import Any, Optional


SHIFT_TIME_PATTERN = re.compile(r"^[0-9]{3,4}$")
CUTOFF_PATTERN = re.compile(r"^[0-9]+$")


class ShiftBucket:
    """Shift bucket names."""
    EARLY = "early"
    MIDDLE = "middle"
    LATE = "late"


def cell_to_text(value: Any) -> str:
    """Render a decoded cell value as trimmed text ("" for unset cells)."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def is_valid_shift_time(value: Any) -> bool:
    """True when the cell holds exactly 3 or 4 ASCII digits."""
    if value is None or isinstance(value, bool):
        return False
    return bool(SHIFT_TIME_PATTERN.match(cell_to_text(value)))


def _parse_cutoff(cutoff: Any) -> Optional[int]:
    text = cell_to_text(cutoff)
    if not CUTOFF_PATTERN.match(text):
        return None
    return int(text)


def classify_shift(value: Any, early_cutoff: Any, late_cutoff: Any) -> Optional[str]:
    """
    Classify a schedule cell into a shift bucket.

    Args:
        value: Raw cell value (string, number or None)
        early_cutoff: Highest shift code that still counts as early
        late_cutoff: Lowest shift code that counts as late

    Returns:
        A ShiftBucket name, or None when the cell is not a shift entry
        or a cutoff is not an integer
    """
    if not is_valid_shift_time(value):
        return None

    early = _parse_cutoff(early_cutoff)
    late = _parse_cutoff(late_cutoff)
    if early is None or late is None:
        return None

    time_code = int(cell_to_text(value))
    if time_code <= early:
        return ShiftBucket.EARLY
    if time_code >= late:
        return ShiftBucket.LATE
    return ShiftBucket.MIDDLE


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def format_date(year: int, month: int, day: int) -> str:
    """ISO date with zero-padded month and day, e.g. 2024-03-05."""
    return f"{year}-{month:02d}-{day:02d}"

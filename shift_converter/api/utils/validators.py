"""
Request validation utilities for API endpoints.

Provides reusable validation functions for common request parameters
to ensure data integrity and consistency across all endpoints.
"""

import re
from datetime import date
from typing import Optional, Tuple

from fastapi import HTTPException
from shift_converter.api.utils.responses import error_response, validation_error_response

CUTOFF_PATTERN = re.compile(r"^[0-9]{1,4}$")


def next_month(today: Optional[date] = None) -> Tuple[int, int]:
    """The month after today's, as (year, month)."""
    today = today or date.today()
    if today.month == 12:
        return today.year + 1, 1
    return today.year, today.month + 1


def validate_year_month(year_month: Optional[str], today: Optional[date] = None) -> Tuple[int, int]:
    """
    Resolve the target month of a conversion.

    Args:
        year_month: "YYYYMM" string; anything not 6 characters long selects
            the month after today
        today: Reference date (default: date.today())

    Returns:
        Tuple of (year, month)

    Raises:
        HTTPException: If a 6-character value is not a valid year and month (400)

    Examples:
        year, month = validate_year_month("202403")  # (2024, 3)
        year, month = validate_year_month("")        # next month
        year, month = validate_year_month("202413")  # Raises HTTPException
    """
    year_month = (year_month or "").strip()
    if len(year_month) != 6:
        return next_month(today)

    if not year_month.isdigit() or not 1 <= int(year_month[4:]) <= 12:
        raise HTTPException(
            status_code=400,
            detail=error_response(
                f"Invalid yearMonth: {year_month}",
                {"expected_format": "YYYYMM", "example": "202403"}
            )
        )
    return int(year_month[:4]), int(year_month[4:])


def validate_cutoffs(early_cutoff: str, late_cutoff: str) -> Tuple[str, str]:
    """
    Validate the shape of the shift cutoffs.

    Only the shape is checked; an early cutoff above the late cutoff is
    accepted.

    Raises:
        HTTPException: If either cutoff is not a 1-4 digit number (400)

    Examples:
        validate_cutoffs("1050", "1150")  # OK
        validate_cutoffs("10:50", "1150") # Raises HTTPException
    """
    errors = {}
    early_cutoff = (early_cutoff or "").strip()
    late_cutoff = (late_cutoff or "").strip()

    if not CUTOFF_PATTERN.match(early_cutoff):
        errors["earlyCutoff"] = "Must be a 1-4 digit number such as 1050"
    if not CUTOFF_PATTERN.match(late_cutoff):
        errors["lateCutoff"] = "Must be a 1-4 digit number such as 1150"

    if errors:
        raise HTTPException(status_code=400, detail=validation_error_response(errors))

    return early_cutoff, late_cutoff


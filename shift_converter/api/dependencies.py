"""
Shared dependencies for API routers.

Provides dependency injection for commonly used services
like loggers and the per-request conversion configuration.
"""

import logging
from dataclasses import dataclass

from shift_converter.settings import (
    MASTER_SHEET_NAME,
    DEFAULT_EARLY_CUTOFF,
    DEFAULT_LATE_CUTOFF,
    RESULT_SHEET_TITLE,
    RESULT_FILENAME,
    EMPLOYEE_SHEET_URL,
    TASK_CODE_SHEET_URL,
    LOOKUP_TIMEOUT_SECONDS,
    LOOKUP_MAX_REDIRECTS
)


# Initialize logger for API routers
def get_logger(name: str = "api") -> logging.Logger:
    """
    Get a logger instance for API routers.

    Args:
        name: Logger name (default: "api")

    Returns:
        Logger instance

    Usage in routers:
        from shift_converter.api.dependencies import get_logger
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)


@dataclass(frozen=True)
class ConvertConfig:
    """Configuration handed to a single conversion request."""
    master_sheet_name: str = MASTER_SHEET_NAME
    early_cutoff: str = DEFAULT_EARLY_CUTOFF
    late_cutoff: str = DEFAULT_LATE_CUTOFF
    result_sheet_title: str = RESULT_SHEET_TITLE
    result_filename: str = RESULT_FILENAME
    employee_sheet_url: str = EMPLOYEE_SHEET_URL
    task_code_sheet_url: str = TASK_CODE_SHEET_URL
    lookup_timeout_seconds: float = LOOKUP_TIMEOUT_SECONDS
    lookup_max_redirects: int = LOOKUP_MAX_REDIRECTS


def get_convert_config() -> ConvertConfig:
    """
    Get the conversion configuration built from config.ini.

    Usage in routers:
        @router.post("/api/convert")
        async def convert_schedule(config: ConvertConfig = Depends(get_convert_config)):
            ...

    Tests override it through app.dependency_overrides.
    """
    return ConvertConfig()

"""
Lookup sheet loading.

The employee and task code tables live in shared Google Sheets. A sharing
URL is rewritten to the sheet's CSV export endpoint, downloaded with a
bounded number of redirect hops and a per-hop timeout, then tokenized into a
grid.

Lookup failures never abort a conversion: the loader logs the reason and
returns None, and the converter falls back to its defaults.
"""

import asyncio
import logging
import re
from typing import Optional, Tuple
from urllib.parse import urljoin

import requests
from fastapi.concurrency import run_in_threadpool

from shift_converter.logics.exceptions import InvalidSheetUrlException, LookupFetchException
from shift_converter.logics.sheet_io import Grid, parse_csv_grid

logger = logging.getLogger(__name__)

REDIRECT_STATUSES = (301, 302, 303, 307, 308)

SPREADSHEET_ID_PATTERN = re.compile(r"/d/([a-zA-Z0-9\-_]+)")
GID_PATTERN = re.compile(r"gid=(\d+)")


def parse_sheet_url(url: str) -> Tuple[Optional[str], str]:
    """Extract (spreadsheet_id, gid) from a sharing URL; gid defaults to "0"."""
    spreadsheet_match = SPREADSHEET_ID_PATTERN.search(url or "")
    gid_match = GID_PATTERN.search(url or "")
    return (
        spreadsheet_match.group(1) if spreadsheet_match else None,
        gid_match.group(1) if gid_match else "0"
    )


def sheet_csv_export_url(url: str) -> Optional[str]:
    spreadsheet_id, gid = parse_sheet_url(url)
    if not spreadsheet_id:
        return None
    return f"https://docs.google.com/spreadsheets/d/{spreadsheet_id}/export?format=csv&gid={gid}"


def fetch_url(url: str, timeout: float, max_redirects: int = 10) -> str:
    """
    Download a URL as text, following redirects manually.

    Args:
        url: URL to fetch
        timeout: Seconds allowed for each hop
        max_redirects: Maximum number of requests in the redirect chain

    Returns:
        Response body decoded as UTF-8

    Raises:
        LookupFetchException: Network error, too many redirects or a
            non-200 final status
    """
    current_url = url
    hops_left = max_redirects

    while True:
        if hops_left <= 0:
            raise LookupFetchException(url, "Too many redirects")

        try:
            response = requests.get(current_url, timeout=timeout, allow_redirects=False)
        except requests.RequestException as e:
            raise LookupFetchException(url, str(e)) from e

        location = response.headers.get("Location")
        if response.status_code in REDIRECT_STATUSES and location:
            current_url = urljoin(current_url, location)
            hops_left -= 1
            logger.debug(f"Redirected to {current_url}")
            continue

        if response.status_code != 200:
            raise LookupFetchException(url, f"HTTP {response.status_code}")

        return response.content.decode("utf-8-sig", errors="replace")


def fetch_lookup_grid(url: str, config) -> Grid:
    """
    Fetch a shared sheet and tokenize it.

    Raises:
        InvalidSheetUrlException: URL carries no spreadsheet id
        LookupFetchException: Download failed
    """
    csv_url = sheet_csv_export_url(url)
    if not csv_url:
        raise InvalidSheetUrlException(url)

    csv_text = fetch_url(
        csv_url,
        timeout=config.lookup_timeout_seconds,
        max_redirects=config.lookup_max_redirects
    )
    return parse_csv_grid(csv_text)


def load_lookup_grid(url: str, config, label: str = "lookup") -> Optional[Grid]:
    """Fetched lookup grid, or None when the sheet cannot be obtained."""
    try:
        grid = fetch_lookup_grid(url, config)
    except InvalidSheetUrlException:
        logger.error(f"Invalid {label} sheet URL: {url!r}")
        return None
    except LookupFetchException as e:
        logger.error(f"Error loading {label} sheet: {e.message}")
        return None
    except Exception as e:
        logger.error(f"Error parsing {label} sheet: {e}", exc_info=True)
        return None

    logger.info(f"Loaded {label} sheet: {len(grid)} rows")
    return grid


async def load_lookup_grids(
    employee_sheet_url: str,
    task_code_sheet_url: str,
    config
) -> Tuple[Optional[Grid], Optional[Grid]]:
    """Fetch the employee and task code sheets concurrently."""
    employee_grid, task_code_grid = await asyncio.gather(
        run_in_threadpool(load_lookup_grid, employee_sheet_url, config, "employee"),
        run_in_threadpool(load_lookup_grid, task_code_sheet_url, config, "task code")
    )
    return employee_grid, task_code_grid

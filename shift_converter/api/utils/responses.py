"""
Response envelopes for the conversion API.

Successful conversions return {"success": true, "data": [records]}. Request
errors are raised as HTTPException with one of the error envelopes below as
the detail, so clients always read detail.success and detail.error.
"""

from typing import Any, Dict, Optional


def success_response(data: Any = None, message: Optional[str] = None) -> Dict:
    """
    Envelope for a successful call.

    The convert endpoint passes the converted records as data; the health
    check passes only a message.

        {"success": true, "data": [{"date": "2025-02-01", "employeeId": "A001", "taskCode": "T-E"}]}
    """
    response = {"success": True}

    if message:
        response["message"] = message

    if data is not None:
        response["data"] = data

    return response


def error_response(message: str, details: Optional[Any] = None) -> Dict:
    """
    Envelope for a request the converter could not process, such as a bad
    yearMonth or an exception raised while reading the workbook.

    The HTTP status is set by the caller on the HTTPException.
    """
    response = {
        "success": False,
        "error": message
    }

    if details is not None:
        response["details"] = details

    return response


def validation_error_response(errors: Dict[str, str]) -> Dict:
    """Envelope for form fields that failed validation, keyed by field name (e.g. earlyCutoff)."""
    return {
        "success": False,
        "error": "Validation failed",
        "validation_errors": errors
    }

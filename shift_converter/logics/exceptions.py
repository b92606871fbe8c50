"""
Custom exceptions for schedule conversion.

Provides specific exception types for different failure scenarios with
structured error messages, context, and recommendations.
"""

from typing import Optional, Dict, Any, List


class ConversionException(Exception):
    """Base exception for schedule conversion operations."""

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        recommendation: Optional[str] = None,
        http_status: int = 400
    ):
        self.message = message
        self.context = context or {}
        self.recommendation = recommendation
        self.http_status = http_status
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to structured error response."""
        error_dict = {
            "success": False,
            "error": self.message
        }
        if self.context:
            error_dict["context"] = self.context
        if self.recommendation:
            error_dict["recommendation"] = self.recommendation
        return error_dict


class FileNotUploadedException(ConversionException):
    """Raised when a conversion is requested without a schedule file."""

    def __init__(self):
        super().__init__(
            message="請上傳檔案",
            recommendation="Attach the monthly schedule workbook (.xlsx) as the 'file' field.",
            http_status=400
        )


class InvalidWorkbookException(ConversionException):
    """Raised when the uploaded file cannot be read as a workbook."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Unable to read workbook: {reason}",
            context={"reason": reason},
            recommendation="Upload a valid .xlsx workbook.",
            http_status=400
        )


class MasterSheetNotFoundException(ConversionException):
    """Raised when the workbook has no master schedule sheet."""

    def __init__(self, sheet_name: str, available: Optional[List[str]] = None):
        super().__init__(
            message=f"找不到「{sheet_name}」表單",
            context={"sheet_name": sheet_name, "available_sheets": available or []},
            recommendation=f"Rename the schedule sheet to '{sheet_name}' and upload again.",
            http_status=400
        )


class InvalidSheetUrlException(ConversionException):
    """Raised when a lookup sheet URL has no document identifier."""

    def __init__(self, url: str):
        super().__init__(
            message=f"Invalid lookup sheet URL: {url!r}",
            context={"url": url},
            recommendation="Use a sharing URL of the form https://docs.google.com/spreadsheets/d/<id>/edit#gid=<gid>.",
            http_status=400
        )


class LookupFetchException(ConversionException):
    """Raised when a lookup sheet cannot be downloaded."""

    def __init__(self, url: str, reason: str):
        super().__init__(
            message=f"Failed to fetch lookup sheet: {reason}",
            context={"url": url, "reason": reason},
            recommendation="Check that the sheet is shared publicly and the URL is reachable.",
            http_status=502
        )


class MalformedOutputRequestException(ConversionException):
    """Raised when a download request does not carry a list of records."""

    def __init__(self, reason: str):
        super().__init__(
            message="無效的資料",
            context={"reason": reason},
            recommendation="Send the 'data' array returned by /api/convert.",
            http_status=400
        )

"""
Schedule conversion endpoints.

Handles:
- Health check
- Conversion of an uploaded monthly schedule into (date, employee ID, task code) records
- Download of converted records as an Excel workbook
"""

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from fastapi.responses import StreamingResponse
from pydantic import BaseModel
from typing import Any, Optional

from shift_converter.logics.converter import build_download_grid, convert
from shift_converter.logics.exceptions import ConversionException, FileNotUploadedException
from shift_converter.logics.lookup_fetcher import load_lookup_grids
from shift_converter.logics.sheet_io import read_sheet_grid, write_grid_xlsx
from shift_converter.api.dependencies import ConvertConfig, get_convert_config, get_logger
from shift_converter.api.utils.responses import success_response, error_response
from shift_converter.api.utils.validators import validate_cutoffs, validate_year_month

# Initialize router and dependencies
router = APIRouter()
logger = get_logger(__name__)

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


class DownloadRequest(BaseModel):
    """Request model for the result download; data is validated by the converter."""
    data: Any = None


@router.get("/")
def health_check():
    """Root endpoint - health check."""
    return success_response(message="Shift schedule converter")


@router.post("/api/convert")
async def convert_schedule(
    file: Optional[UploadFile] = File(None),
    yearMonth: str = Form(""),
    earlyCutoff: Optional[str] = Form(None),
    lateCutoff: Optional[str] = Form(None),
    employeeSheetUrl: Optional[str] = Form(None),
    taskCodeSheetUrl: Optional[str] = Form(None),
    config: ConvertConfig = Depends(get_convert_config)
):
    """
    Convert an uploaded monthly schedule workbook.

    Request Body (multipart/form-data):
        file: Schedule workbook containing the master sheet
        yearMonth: Target month as YYYYMM (default: next month)
        earlyCutoff: Highest shift code counted as early (default from config)
        lateCutoff: Lowest shift code counted as late (default from config)
        employeeSheetUrl: Shared sheet with name -> employee ID rows
        taskCodeSheetUrl: Shared sheet with the master control task codes

    Responses:
        200: {"success": true, "data": [{"date", "employeeId", "taskCode"}, ...]}
        400: Missing file, unreadable workbook, missing master sheet or invalid parameters
        500: Processing error

    Processing:
        - Decodes the master sheet of the upload
        - Fetches both lookup sheets concurrently; an unavailable sheet
          falls back to defaults instead of failing the request
        - Classifies every shift cell and resolves employee IDs and task codes
    """
    try:
        if file is None:
            raise FileNotUploadedException()

        year, month = validate_year_month(yearMonth)
        early_cutoff, late_cutoff = validate_cutoffs(
            earlyCutoff or config.early_cutoff,
            lateCutoff or config.late_cutoff
        )

        contents = await file.read()
        master_grid = read_sheet_grid(contents, config.master_sheet_name)

        employee_grid, task_code_grid = await load_lookup_grids(
            employeeSheetUrl or config.employee_sheet_url,
            taskCodeSheetUrl or config.task_code_sheet_url,
            config
        )

        result = convert(
            master_grid,
            employee_grid,
            task_code_grid,
            year,
            month,
            early_cutoff,
            late_cutoff,
            master_sheet_name=config.master_sheet_name
        )

    except HTTPException:
        raise
    except ConversionException as e:
        logger.warning(f"Conversion rejected: {e.message}")
        raise HTTPException(status_code=e.http_status, detail=e.to_dict())
    except Exception as e:
        logger.error(f"Convert error: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=error_response("Error converting schedule file", str(e))
        )

    if not result["success"]:
        raise HTTPException(status_code=400, detail=result)

    return success_response(data=[record.to_dict() for record in result["records"]])


@router.post("/api/download")
def download_result(
    request: DownloadRequest,
    config: ConvertConfig = Depends(get_convert_config)
):
    """
    Download converted records as an Excel workbook.

    Body Parameters (JSON):
        data: Array of {"date", "employeeId", "taskCode"} records

    Responses:
        200: Excel file stream
        400: data is missing or not an array of records
        500: Workbook generation error
    """
    try:
        grid = build_download_grid(request.data)
        output = write_grid_xlsx(grid, config.result_sheet_title)
    except ConversionException as e:
        logger.warning(f"Download rejected: {e.message}")
        raise HTTPException(status_code=e.http_status, detail=e.to_dict())
    except Exception as e:
        logger.error(f"Download error: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=error_response("Error creating result workbook", str(e))
        )

    logger.info(f"Prepared download with {len(grid) - 1} records")
    return StreamingResponse(
        output,
        media_type=XLSX_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{config.result_filename}"'}
    )

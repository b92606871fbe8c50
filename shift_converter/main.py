"""
FastAPI application entry point.

Registers all API routers and handles application startup configuration.
"""

from fastapi import FastAPI
import logging

from shift_converter.settings import (
    MODE,
    MASTER_SHEET_NAME,
    setup_logging
)

# Import all routers
from shift_converter.api.routers.convert_router import router as convert_router

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

# Initialize FastAPI application
app = FastAPI(
    title="Shift Schedule Converter API",
    description="Converts monthly shift schedules into date / employee ID / task code records",
    version="0.1.0",
)

# Register routers
app.include_router(convert_router, tags=["Schedule Conversion"])

logger.info("[Startup] All routers registered successfully")
logger.info("[Startup] Master sheet: %s", MASTER_SHEET_NAME)
logger.info("[Startup] Application started in %s mode", MODE.upper())

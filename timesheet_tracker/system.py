import logging
from fastapi import APIRouter, Depends

from timesheet_tracker.store import TimesheetStore
from timesheet_tracker.timesheet_schema import HealthStatus, SystemInfo
from timesheet_tracker.utils import get_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["System"])


# -----------------------------------------------------------
# SYSTEM INFO
# -----------------------------------------------------------
@router.get("/api/info", response_model=SystemInfo)
async def system_info(store: TimesheetStore = Depends(get_store)):
    logger.info("System info requested")
    return store.info()


# -----------------------------------------------------------
# HEALTH (liveness probe, always 200 while the process is up)
# -----------------------------------------------------------
@router.get("/health", response_model=HealthStatus)
async def health(store: TimesheetStore = Depends(get_store)):
    logger.info("Health check performed")
    return store.health_check()

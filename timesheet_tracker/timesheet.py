import json
import logging
from fastapi import APIRouter, Depends, Request

from timesheet_tracker.store import TimesheetStore
from timesheet_tracker.timesheet_schema import SubmitResponse, TimesheetList
from timesheet_tracker.utils import get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/timesheets", tags=["Timesheet"])


class MalformedPayload(Exception):
    """Request body could not be read as a JSON object."""


# ---------------- BODY PARSING ----------------
async def read_payload(request: Request):
    """
    Parse the raw JSON body without a schema.
    Empty body -> {}. Invalid JSON or a non-object raises MalformedPayload,
    which the app turns into a generic 500.
    """
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedPayload(str(e)) from e
    if not isinstance(payload, dict):
        raise MalformedPayload(f"Expected a JSON object, got {type(payload).__name__}")
    return payload


# ---------------- LIST TIMESHEETS ----------------
@router.get("", response_model=TimesheetList, response_model_exclude_unset=True)
async def list_timesheets(store: TimesheetStore = Depends(get_store)):
    logger.info("Fetching timesheets - Total: %d", store.total)
    return store.list()


# ---------------- SUBMIT TIMESHEET ----------------
@router.post("", response_model=SubmitResponse, response_model_exclude_unset=True)
async def submit_timesheet(
    payload: dict = Depends(read_payload),
    store: TimesheetStore = Depends(get_store),
):
    # No validation, whatever was sent is stored and echoed back
    entry = store.submit(payload)
    logger.info(
        "Timesheet submitted: %s - %sh on %s",
        entry.get("name"), entry.get("hours"), entry.get("project"),
    )
    return {"success": True, "entry": entry}

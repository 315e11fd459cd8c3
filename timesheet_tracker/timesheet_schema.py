# timesheet_tracker/timesheet_schema.py
from pydantic import BaseModel, ConfigDict
from typing import Any, List, Optional


class TimesheetEntry(BaseModel):
    # Extra fields are stored verbatim, nothing is coerced
    model_config = ConfigDict(extra="allow")

    name: Optional[Any] = None
    date: Optional[Any] = None
    hours: Optional[Any] = None
    project: Optional[Any] = None
    timestamp: str
    id: int


class TimesheetList(BaseModel):
    total: int
    totalHours: str
    timesheets: List[TimesheetEntry]


class SubmitResponse(BaseModel):
    success: bool = True
    entry: TimesheetEntry


class SystemInfo(BaseModel):
    version: str
    deploymentTime: str
    status: str
    totalTimesheets: int
    totalRequests: int


class HealthStatus(BaseModel):
    status: str
    uptime: float
    timestamp: str

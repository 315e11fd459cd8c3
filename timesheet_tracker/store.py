# timesheet_tracker/store.py
"""
In-memory timesheet store.

One ``TimesheetStore`` lives on ``app.state.store`` for the lifetime of the
application. Entries are append-only and are lost when the process exits.
Every operation here is synchronous, so under a single event loop they are
serialized without a lock. Multiple worker processes each get their own store.
"""
import logging
import math
import time
from numbers import Real
from typing import Any, Dict, List, Mapping, Optional

from timesheet_tracker.config import APP_VERSION, RECENT_LIMIT
from timesheet_tracker.utils import json_safe, time_id, utc_now_iso

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _as_float(value: Real) -> float:
    try:
        return float(value)
    except OverflowError:
        # int too large for a float
        return math.inf if value > 0 else -math.inf


def format_total_hours(entries: List[Dict[str, Any]]) -> str:
    """
    Sum ``hours`` across entries, one decimal place.

    An explicit null adds nothing. A missing key or a non-numeric value
    anywhere turns the aggregate into "NaN". Overflow gives "Infinity"
    or "-Infinity". Never raises.
    """
    total = 0.0
    for e in entries:
        if "hours" not in e:
            return "NaN"
        hours = e["hours"]
        if hours is None:
            continue
        if not _is_number(hours):
            return "NaN"
        total += _as_float(hours)
    if math.isnan(total):
        return "NaN"
    if math.isinf(total):
        return "Infinity" if total > 0 else "-Infinity"
    return f"{total:.1f}"


class TimesheetStore:
    def __init__(self, version: str = APP_VERSION):
        self.version = version
        self.deployment_time = utc_now_iso()
        self.started = time.monotonic()

        self._entries: List[Dict[str, Any]] = []
        self._request_count = 0

    # ---------------- COUNTERS ----------------
    @property
    def request_count(self) -> int:
        return self._request_count

    @property
    def total(self) -> int:
        return len(self._entries)

    def count_request(self) -> int:
        self._request_count += 1
        return self._request_count

    # ---------------- WRITE ----------------
    def submit(self, payload: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """
        Copy the payload verbatim, stamp ``timestamp`` and ``id``, append.
        No field is validated; ``id`` is milliseconds since the epoch and
        can repeat for two submissions in the same millisecond.
        """
        entry = dict(payload or {})
        entry["timestamp"] = utc_now_iso()
        entry["id"] = time_id()
        self._entries.append(entry)
        return json_safe(entry)

    # ---------------- READ ----------------
    def list(self) -> Dict[str, Any]:
        recent = self._entries[-RECENT_LIMIT:]
        return {
            "total": self.total,
            "totalHours": format_total_hours(self._entries),
            "timesheets": [json_safe(e) for e in reversed(recent)],
        }

    def info(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "deploymentTime": self.deployment_time,
            "status": "running",
            "totalTimesheets": self.total,
            "totalRequests": self._request_count,
        }

    def uptime(self) -> float:
        return max(0.0, time.monotonic() - self.started)

    def health_check(self) -> Dict[str, Any]:
        # liveness only, never inspects the entries
        return {
            "status": "healthy",
            "uptime": self.uptime(),
            "timestamp": utc_now_iso(),
        }

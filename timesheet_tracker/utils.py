# utils.py
import math
import time
from datetime import datetime, timezone
from fastapi import Request


# -------------------------------
# TIME HELPERS
# -------------------------------
def utc_now_iso() -> str:
    """2024-01-01T09:30:00.123Z"""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def time_id() -> int:
    # millisecond resolution, collides within the same millisecond
    return int(time.time() * 1000)


def server_time_label() -> str:
    return datetime.now().strftime("%m/%d/%Y, %I:%M:%S %p")


# -------------------------------
# JSON OUTPUT
# -------------------------------
def json_safe(value):
    """
    Deep copy of a JSON value with NaN/Infinity floats turned into None,
    so the response encoder (allow_nan=False) never rejects a stored entry.
    """
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: json_safe(v) for k, v in value.items()}
    if isinstance(value, list):
        return [json_safe(v) for v in value]
    return value


# -------------------------------
# STORE (DEPENDENCY)
# -------------------------------
def get_store(request: Request):
    return request.app.state.store

# timesheet_tracker/config.py
import os
from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


# ----------------------------------------
# 🔵 APP / DEPLOYMENT
# ----------------------------------------
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
APP_TITLE = "Timesheet Tracker API"

# ----------------------------------------
# 🟢 SERVER
# ----------------------------------------
HOST = os.getenv("HOST", "0.0.0.0")
PORT = _env_int("PORT", 5000)

# Comma separated, "*" allows everything
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Served at "/" after the API routes, only if the directory exists
STATIC_DIR = os.getenv("STATIC_DIR", "public")

# ----------------------------------------
# 🟣 LOGGING
# ----------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# ----------------------------------------
# ⏰ TIMESHEETS
# ----------------------------------------
# Listing never returns more than this many entries
RECENT_LIMIT = 10

# timesheet_tracker/logging_setup.py
import logging

from timesheet_tracker.config import LOG_FORMAT, LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL) -> None:
    """basicConfig is a no-op once the root has handlers; the level is always applied."""
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(getattr(logging, level, logging.INFO))

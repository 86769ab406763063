import logging
import os

QUIET_LOGGERS = ("urllib3", "requests", "watchdog")


def configure_logging(level_name=None):
    """Configure root logging once per process; ``level_name`` overrides DASHBOARD_LOG_LEVEL."""
    level_name = str(level_name or os.getenv("DASHBOARD_LOG_LEVEL") or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    return logging.getLogger("dashboard")

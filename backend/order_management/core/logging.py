"""
Logging setup for the API process
"""
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a single stream handler on the root logger"""
    root = logging.getLogger()
    root.setLevel(level.upper())

    # Uvicorn reloads import main twice; avoid stacking handlers
    if any(getattr(h, "_order_management", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._order_management = True
    root.addHandler(handler)

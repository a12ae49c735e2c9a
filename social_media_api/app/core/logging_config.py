"""
Logging configuration for the API process.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger once, and aligns the level of the
application's own loggers and of uvicorn's loggers with the configured
level, so ``LOG_LEVEL`` controls the whole process.  The uvicorn
access log stays at ``WARNING`` unless ``DEBUG`` is requested.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

APP_LOGGER = "social_media_api"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error")
ACCESS_LOGGER = "uvicorn.access"


def resolve_level(level: str) -> int:
    """Map a level name to its numeric value; unknown names give ``INFO``."""
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure process logging.

    Handlers are attached to the root logger only when it has none yet
    (tests and repeated ``create_app`` calls reuse them); levels are
    applied on every call.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    """
    numeric_level = resolve_level(level)
    root = logging.getLogger()

    if not root.handlers:
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

        if logfile:
            file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    root.setLevel(numeric_level)
    logging.getLogger(APP_LOGGER).setLevel(numeric_level)
    for name in UVICORN_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)
    logging.getLogger(ACCESS_LOGGER).setLevel(
        numeric_level if numeric_level <= logging.DEBUG else max(numeric_level, logging.WARNING)
    )

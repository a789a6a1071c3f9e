"""
Logging setup for the Customer API.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger once per process.  Per-request access
lines from uvicorn are only shown at ``DEBUG``; at other levels the
service's own create/update/delete messages are what ends up in the
log.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers that emit one line per HTTP request.
ACCESS_LOGGERS = ("uvicorn.access",)


def _build_handlers(logfile: Optional[str]) -> list:
    handlers = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and the access loggers.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        File to copy log records to.  Missing parent directories are
        created.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    # Access lines are noise unless the operator asked for DEBUG.
    access_level = logging.DEBUG if numeric_level <= logging.DEBUG else logging.WARNING
    for name in ACCESS_LOGGERS:
        logging.getLogger(name).setLevel(access_level)

    root = logging.getLogger()
    if root.handlers:
        # Already configured, e.g. by pytest or a repeated ``create_app``.
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)

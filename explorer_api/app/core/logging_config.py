"""
Basic logging configuration for the application.

The ``setup_logging`` function configures the root logger with a
console and an optional file handler, and routes the server's own
loggers through it so that one format covers everything:

* ``explorer_api.access`` – one line per request, written by
  ``core.middleware``.  It replaces uvicorn's access log.
* ``uvicorn`` / ``uvicorn.error`` – server start‑up and shutdown
  messages.  Their own handlers are removed and records propagate to
  the root logger.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

ACCESS_LOGGER = "explorer_api.access"
SERVER_LOGGERS = ("uvicorn", "uvicorn.error")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root, access and server loggers.

    Handlers are attached to the root logger only once; calling the
    function again (tests, repeated ``create_app`` calls) just
    re-applies levels and propagation.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(numeric_level)

    if not root.handlers:
        formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

        if logfile:
            log_path = Path(logfile).resolve()
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    # Request lines are INFO; keep them even when the root is set to
    # WARNING for quieter application logs.
    logging.getLogger(ACCESS_LOGGER).setLevel(min(numeric_level, logging.INFO))

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.setLevel(numeric_level)
        server_logger.propagate = True

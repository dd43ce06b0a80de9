"""
Logging setup for the API process.

``setup_logging`` installs the service's console handler (and a file
handler when ``LOG_FILE`` is set) on the root logger.  The handlers are
named, so a second call, for example from another ``create_app`` in
tests, leaves them in place instead of stacking duplicates.  Handlers
added by other tools (uvicorn, pytest) are left alone.
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "flight_registration_api.console"
FILE_HANDLER_NAME = "flight_registration_api.file"


def _named_handler(handler: logging.Handler, name: str) -> logging.Handler:
    handler.set_name(name)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the service.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Also write records to this file when given.
    """
    root = logging.getLogger()
    installed = {h.get_name() for h in root.handlers}
    if CONSOLE_HANDLER_NAME in installed:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.addHandler(_named_handler(logging.StreamHandler(), CONSOLE_HANDLER_NAME))
    if logfile:
        root.addHandler(
            _named_handler(logging.FileHandler(logfile, encoding="utf-8"), FILE_HANDLER_NAME)
        )

# src/config/logging_config.py

"""Logging for the QuickFind server and CLI.

One ``logs/run_<timestamp>.log`` file per process holds everything at
DEBUG; stderr shows whatever the caller asks for. uvicorn's own loggers
are pointed at the same two handlers, so request lines and server
lifecycle messages sit next to the scraper output instead of going
through uvicorn's default console config.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings

APP_LOGGER = "quickfind"
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

_FILE_FORMAT = (
    "%(asctime)s %(levelname)s [%(name)s] %(funcName)s:%(lineno)d "
    "%(message)s"
)
_STDERR_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_DATE_FORMAT = "%H:%M:%S"


def _run_log_path() -> Path:
    Settings.LOGS_DIR.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return Settings.LOGS_DIR / f"run_{stamp}.log"


def _build_handlers(
    log_file: Path, console_level: int
) -> list[logging.Handler]:
    to_file = logging.FileHandler(log_file, encoding="utf-8")
    to_file.setLevel(logging.DEBUG)
    to_file.setFormatter(logging.Formatter(_FILE_FORMAT))

    to_stderr = logging.StreamHandler(sys.stderr)
    to_stderr.setLevel(console_level)
    to_stderr.setFormatter(
        logging.Formatter(_STDERR_FORMAT, datefmt=_DATE_FORMAT)
    )
    return [to_file, to_stderr]


def setup_logging(console_level: int = logging.INFO) -> Path:
    """Attach the run-file and stderr handlers to the app and server loggers.

    The server passes INFO so each request shows on the console; the
    headless CLI passes WARNING so only problems interrupt its output.
    Calling it again while handlers are attached changes nothing.
    Returns the path of this run's log file.
    """
    app_logger = logging.getLogger(APP_LOGGER)
    app_logger.setLevel(logging.DEBUG)
    if app_logger.handlers:
        for handler in app_logger.handlers:
            if isinstance(handler, logging.FileHandler):
                return Path(handler.baseFilename)
        return _run_log_path()

    log_file = _run_log_path()
    handlers = _build_handlers(log_file, console_level)
    for handler in handlers:
        app_logger.addHandler(handler)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers = list(handlers)
        server_logger.propagate = False

    app_logger.info("Writing run log to %s", log_file)
    return log_file

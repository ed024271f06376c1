"""Logging setup for Botpanel.

Console output plus rotating log files. Modules log through
logging.getLogger(__name__); this only wires up the root logger.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from botpanel.config import Config

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_initialized = False


def setup_logging(log_level: str | None = None, log_dir: str | None = None) -> None:
    """Initialize the logging system.

    Safe to call more than once; only the first call installs handlers.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to Config.LOG_LEVEL.
        log_dir: Directory to store log files. Defaults to Config.LOG_DIR.
    """
    global _initialized
    if _initialized:
        return

    level = getattr(logging, (log_level or Config.LOG_LEVEL).upper(), logging.INFO)
    log_dir = log_dir or Config.LOG_DIR
    os.makedirs(log_dir, exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Main log file handler (rotating)
    file_handler = RotatingFileHandler(
        os.path.join(log_dir, "botpanel.log"),
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    # Error log file handler (separate file for errors)
    error_handler = RotatingFileHandler(
        os.path.join(log_dir, "botpanel_errors.log"),
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=3,
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(error_handler)

    # Supabase's HTTP stack logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    _initialized = True
    logging.getLogger(__name__).info(
        f"Logging initialized (level: {logging.getLevelName(level)}, dir: {log_dir})"
    )

"""
Logging setup for Standarr
Console output plus rotating main and error log files
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from standarr import config

LOG_FORMAT = "[%(asctime)s] %(levelname)-8s [%(name)s:%(lineno)d] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are too chatty at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "uvicorn.access")

_configured = False


def setup_logging(log_dir: str | None = None, log_level: str | None = None) -> None:
    """
    Configure the root logger once.

    Args:
        log_dir: Directory for log files (default: LOG_DIR)
        log_level: Log level name (default: LOG_LEVEL)
    """
    global _configured
    if _configured:
        return

    log_dir = log_dir or config.LOG_DIR
    level = getattr(logging, (log_level or config.LOG_LEVEL).upper(), logging.INFO)

    os.makedirs(log_dir, exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Main log file handler (rotating)
    file_handler = RotatingFileHandler(
        os.path.join(log_dir, "standarr.log"),
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
    )
    file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
    file_handler.setFormatter(formatter)

    # Error log file handler (separate file for errors)
    error_handler = RotatingFileHandler(
        os.path.join(log_dir, "standarr_errors.log"),
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=3,
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(min(level, logging.DEBUG))
    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(error_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True

    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info("%s %s", config.APP_NAME, config.VERSION)
    logger.info("Log level: %s", logging.getLevelName(level))
    logger.info("Log directory: %s", log_dir)
    logger.info("=" * 60)

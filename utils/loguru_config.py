"""
Module Name: loguru_config.py
Author: Status Page Development Team
Created: Oct 19 2026
Description:
    Console and rotating file sinks for the service. Standard logging records
    are forwarded to Loguru, which does all level filtering.

Location:
    /utils/loguru_config.py

"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from loguru import logger

DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[logger_name]} - {message}"


class InterceptHandler(logging.Handler):
    """Forward a standard logging record to Loguru under its logger name."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.bind(logger_name=record.name).opt(exception=record.exc_info).log(level, record.getMessage())


def setup_loguru(log_level: Union[str, int] = "INFO", log_file: str = "status_page.log",
                 logger_name: str = "StatusPage", log_dir: Optional[Path] = None):
    """Reset Loguru sinks and send every standard logger through them."""

    # SUCCESS ships with Loguru; register it if a custom build lacks it
    try:
        logger.level("SUCCESS")
    except ValueError:
        logger.level("SUCCESS", no=25, color="<green>")

    level = log_level.upper() if isinstance(log_level, str) else log_level
    log_path = Path(log_dir or DEFAULT_LOG_DIR)
    log_path.mkdir(parents=True, exist_ok=True)

    logger.remove()
    logger.configure(extra={"logger_name": logger_name})
    logger.add(sys.stdout, level=level, format=LOG_FORMAT, enqueue=True, diagnose=False)
    logger.add(log_path / log_file, level=level, format=LOG_FORMAT, rotation="10 MB",
               retention=5, encoding="utf-8", enqueue=True, diagnose=False)

    # Loguru sinks filter; the stdlib side passes everything through
    logging.basicConfig(handlers=[InterceptHandler()], level=logging.NOTSET, force=True)
    logging.getLogger().setLevel(logging.NOTSET)
    for noisy in ("urllib3", "werkzeug"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return logger

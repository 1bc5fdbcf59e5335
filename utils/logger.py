import logging

from utils.loguru_config import setup_loguru


_LOGGER_INITIALIZED = False
ROOT_LOGGER_NAME = "StatusPage"


def setup_logger(name=ROOT_LOGGER_NAME, log_file="status_page.log", level="INFO"):
    """Set up the application logger backed by Loguru sinks (idempotent)."""
    global _LOGGER_INITIALIZED

    parent_logger = logging.getLogger(name)
    if _LOGGER_INITIALIZED:
        return parent_logger

    setup_loguru(log_level=level, log_file=log_file, logger_name=name)
    _LOGGER_INITIALIZED = True

    parent_logger.debug(f"Logger initialized - Log file: {log_file}")
    return parent_logger


def get_module_logger(module_name: str):
    """Get a logger for a specific module under the application namespace."""
    if module_name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(module_name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{module_name}")

"""
Module Name: __init__.py
Author: Status Page Development Team
Created: Oct 19 2026
Description:
    Shared logging helpers used across the codebase.

Location:
    /utils/__init__.py

"""

from .logger import get_module_logger, setup_logger

__all__ = ["setup_logger", "get_module_logger"]

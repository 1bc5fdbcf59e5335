"""
Slack Service Package - Status Page

Channel history client and the status message normalization built on it.
"""

from .connection import SlackConnection
from .models import PageModel, StatusMessage
from .status_history import StatusHistoryReader, build_page_model, normalize_message


__all__ = [
    'SlackConnection',
    'StatusHistoryReader',
    'StatusMessage',
    'PageModel',
    'build_page_model',
    'normalize_message',
]

"""
Status Page Service Package - Status Page

Request-level orchestration for the page, subscriptions and broadcasts.
"""

from .status_page_service import StatusPageService


__all__ = ['StatusPageService']

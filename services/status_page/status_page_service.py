"""
Module Name: status_page_service.py
Author: Status Page Development Team
Created: Oct 19 2026
Description:
    Request-level operations behind the status page routes. Every failure is
    logged where it happens and swallowed; callers only ever get a rendered
    page, ``None`` or an OperationResult to log.

Location:
    /services/status_page/status_page_service.py

"""

from typing import Callable, List, Optional

from services.error_handling import OperationResult, UpstreamUnavailable
from services.slack.models import PageModel
from services.slack.status_history import build_page_model
from utils.logger import get_module_logger

INDEX_TEMPLATE = "index.html"


class StatusPageService:
    """Orchestrates history reads, subscriber changes and broadcasts."""

    def __init__(
        self,
        reader,
        subscribers,
        status_store,
        broadcaster,
        render: Callable[..., str],
        *,
        title: str = "Status Page",
        history_count: int = 10,
        logger=None,
    ):
        self.reader = reader
        self.subscribers = subscribers
        self.status_store = status_store
        self.broadcaster = broadcaster
        self.render = render
        self.title = title
        self.history_count = history_count
        self.logger = logger or get_module_logger("Service.StatusPage")

    # ------------------------------------------------------------------
    # Page
    # ------------------------------------------------------------------
    def build_page(self) -> PageModel:
        messages = self.reader.fetch_latest(self.history_count)
        return build_page_model(self.title, messages)

    def render_index(self) -> Optional[str]:
        """Rendered page HTML, or None when the channel history is unavailable."""
        try:
            page = self.build_page()
        except UpstreamUnavailable as exc:
            self.logger.error(f"Status page not rendered: {exc}")
            return None
        return self.render(INDEX_TEMPLATE, page=page)

    # ------------------------------------------------------------------
    # Subscribers
    # ------------------------------------------------------------------
    def handle_subscribe(self, email: str) -> OperationResult:
        if not email:
            return OperationResult.skip("subscribe", "email").log(self.logger)
        return self.subscribers.add(email)

    def handle_unsubscribe(self, email: str) -> OperationResult:
        return self.subscribers.remove(email)

    def handle_list_subscribers(self) -> List[str]:
        emails = self.subscribers.list()
        for email in emails:
            self.logger.info(email)
        return emails

    # ------------------------------------------------------------------
    # Status and broadcast
    # ------------------------------------------------------------------
    def handle_update_status(self, status: str) -> OperationResult:
        if not status:
            return OperationResult.skip("update-status", "status").log(self.logger)
        return self.status_store.set(status)

    def handle_broadcast(self) -> OperationResult:
        return self.broadcaster.broadcast_latest()

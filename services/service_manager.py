"""
Module Name: service_manager.py
Author: Status Page Development Team
Created: Oct 19 2026
Description:
    Builds the process-wide clients (Redis, Slack, SendGrid) and the services
    that share them. Each instance is created once, under a lock, and handed
    to the components through their constructors.

Location:
    /services/service_manager.py

"""

import threading
from typing import Any, Callable, Dict, Mapping, Optional

from utils.logger import get_module_logger


_LOGGER = get_module_logger("Service.Manager")


class ServiceManager:
    """Lazy, thread-safe owner of every shared client and service."""

    def __init__(
        self,
        config: Mapping[str, Any],
        render: Optional[Callable[..., str]] = None,
        *,
        redis_client=None,
        slack_connection=None,
        email_client=None,
        logger=None,
    ):
        self.config = config
        self.render = render
        self.logger = logger or _LOGGER
        self._lock = threading.RLock()
        self._services: Dict[str, Any] = {}
        if redis_client is not None:
            self._services['redis'] = redis_client
        if slack_connection is not None:
            self._services['slack'] = slack_connection
        if email_client is not None:
            self._services['sendgrid'] = email_client

    def _log_initialized(self, service_name: str):
        self.logger.info(f"Service initialized: {service_name}")

    def _get_or_create(self, name: str, factory: Callable[[], Any]):
        if name not in self._services:
            with self._lock:
                if name not in self._services:
                    self._services[name] = factory()
                    self._log_initialized(name)
        return self._services[name]

    # ------------------------------------------------------------------
    # Shared clients
    # ------------------------------------------------------------------
    def get_redis_client(self):
        def factory():
            from services.store import create_redis_client
            return create_redis_client(
                self.config['REDIS_ADDRESS'],
                password=self.config.get('REDIS_PASSWORD', ''),
                db=self.config.get('REDIS_DB', 0),
            )
        return self._get_or_create('redis', factory)

    def get_slack_connection(self):
        def factory():
            from services.slack import SlackConnection
            return SlackConnection(
                self.config.get('SLACK_TOKEN', ''),
                api_url=self.config.get('SLACK_API_URL', 'https://slack.com/api'),
                timeout=self.config.get('UPSTREAM_TIMEOUT'),
            )
        return self._get_or_create('slack', factory)

    def get_email_client(self):
        def factory():
            from services.broadcast import SendGridConnection
            return SendGridConnection(
                self.config.get('SENDGRID_API_KEY', ''),
                api_url=self.config.get('SENDGRID_API_URL', 'https://api.sendgrid.com/v3'),
                timeout=self.config.get('UPSTREAM_TIMEOUT'),
            )
        return self._get_or_create('sendgrid', factory)

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------
    def get_subscriber_store(self):
        def factory():
            from services.store import SubscriberStore
            return SubscriberStore(self.get_redis_client())
        return self._get_or_create('subscribers', factory)

    def get_status_store(self):
        def factory():
            from services.store import StatusStore
            return StatusStore(self.get_redis_client())
        return self._get_or_create('status_store', factory)

    def get_status_history_reader(self):
        def factory():
            from services.slack import StatusHistoryReader
            return StatusHistoryReader(self.get_slack_connection(), self.config.get('SLACK_CHANNEL', ''))
        return self._get_or_create('status_history', factory)

    def get_broadcast_service(self):
        def factory():
            from services.broadcast import BroadcastService, DeliveryPool
            pool = DeliveryPool(
                max_workers=self.config.get('BROADCAST_MAX_WORKERS', 8),
                max_pending=self.config.get('BROADCAST_MAX_PENDING', 1000),
            )
            return BroadcastService(
                self.get_status_history_reader(),
                self.get_subscriber_store(),
                self.get_email_client(),
                self._require_render(),
                pool,
                from_address=self.config.get('EMAIL_FROM', 'hello@domain.com'),
                subject=self.config.get('EMAIL_SUBJECT', 'Status Update'),
            )
        return self._get_or_create('broadcast', factory)

    def get_status_page_service(self):
        def factory():
            from services.status_page import StatusPageService
            return StatusPageService(
                self.get_status_history_reader(),
                self.get_subscriber_store(),
                self.get_status_store(),
                self.get_broadcast_service(),
                self._require_render(),
                title=self.config.get('PAGE_TITLE', 'Status Page'),
                history_count=self.config.get('HISTORY_COUNT', 10),
            )
        return self._get_or_create('status_page', factory)

    def _require_render(self) -> Callable[..., str]:
        if self.render is None:
            raise RuntimeError("ServiceManager has no template renderer attached")
        return self.render

    def shutdown(self, wait: bool = False):
        """Stop the delivery pool if it was ever started."""
        broadcast = self._services.get('broadcast')
        if broadcast is not None:
            broadcast.shutdown(wait=wait)

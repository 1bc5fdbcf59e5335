"""
Module Name: broadcast_service.py
Author: Status Page Development Team
Created: Oct 19 2026
Description:
    Sends the latest channel status to every subscriber. Each subscriber gets
    an independent delivery on the worker pool; the caller never waits and one
    failed send does not affect the others.

Location:
    /services/broadcast/broadcast_service.py

"""

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from services.error_handling import OperationResult, UpstreamUnavailable
from utils.logger import get_module_logger

from .delivery_pool import DeliveryPool

EMAIL_TEMPLATE = "email-template.html"


@dataclass(frozen=True)
class EmailDispatch:
    """One email for one subscriber in one broadcast."""

    recipient: str
    body_context: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def for_subscriber(cls, recipient: str, message: str) -> "EmailDispatch":
        return cls(recipient=recipient, body_context={'message': message, 'recipient': recipient})


class BroadcastService:
    """Fans the latest status out to the subscriber list."""

    def __init__(
        self,
        reader,
        subscribers,
        email_client,
        render: Callable[..., str],
        pool: DeliveryPool,
        *,
        from_address: str,
        subject: str,
        logger=None,
    ):
        self.reader = reader
        self.subscribers = subscribers
        self.email_client = email_client
        self.render = render
        self.pool = pool
        self.from_address = from_address
        self.subject = subject
        self.logger = logger or get_module_logger("Service.Broadcast")

    def broadcast_latest(self) -> OperationResult:
        """Read the newest message once and queue one delivery per subscriber."""
        try:
            messages = self.reader.fetch_latest(1)
            if not messages:
                raise UpstreamUnavailable("slack", "channel history is empty")
        except UpstreamUnavailable as exc:
            self.logger.error(f"Broadcast aborted: {exc}")
            return OperationResult.failure("broadcast", exc)

        latest_text = messages[0].text
        self.logger.info(f"Sending status: {latest_text}")

        dispatches = self.build_dispatches(latest_text, self.subscribers.list())
        for dispatch in dispatches:
            self.pool.submit(self.deliver_one, dispatch)

        self.logger.debug(f"Queued {len(dispatches)} delivery task(s)")
        return OperationResult.success("broadcast")

    @staticmethod
    def build_dispatches(message: str, recipients: List[str]) -> List[EmailDispatch]:
        return [EmailDispatch.for_subscriber(recipient, message) for recipient in recipients]

    def deliver_one(self, dispatch: EmailDispatch) -> bool:
        """Render and send a single email. No retry."""
        try:
            html = self.render(EMAIL_TEMPLATE, **dispatch.body_context)
            self.email_client.send(
                to=dispatch.recipient,
                from_address=self.from_address,
                subject=self.subject,
                html=html,
            )
        except Exception as exc:
            self.logger.error(exc)
            return False

        self.logger.info(f"Email sent to: {dispatch.recipient}")
        return True

    def wait_for_outstanding(self, timeout: Optional[float] = None) -> bool:
        return self.pool.wait_for_outstanding(timeout=timeout)

    def shutdown(self, wait: bool = False):
        self.pool.shutdown(wait_for_tasks=wait)

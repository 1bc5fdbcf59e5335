"""
Module Name: status_history.py
Author: Status Page Development Team
Created: Oct 19 2026
Description:
    Reads recent status messages from the Slack channel and shapes them into
    the page model. The newest message is always promoted to ``latest``; older
    messages only make it into ``history`` when they are not success-marked.

Location:
    /services/slack/status_history.py

"""

from datetime import datetime
from typing import Any, Dict, List, Sequence

from services.error_handling import UpstreamUnavailable
from utils.logger import get_module_logger

from .models import SUCCESS_FLAG, SUCCESS_MARKER, PageModel, StatusMessage


def parse_slack_timestamp(raw_ts: str) -> datetime:
    """Convert a Slack ``ts`` (``"1700000000.000200"``) into local time."""
    try:
        seconds = int(str(raw_ts)[:10])
    except (TypeError, ValueError):
        seconds = 0
    return datetime.fromtimestamp(seconds)


def normalize_message(raw: Dict[str, Any]) -> StatusMessage:
    """Strip the success marker once and flag success from the raw text."""
    raw_text = raw.get('text') or ''
    return StatusMessage(
        text=raw_text.replace(SUCCESS_MARKER, '', 1),
        timestamp=parse_slack_timestamp(raw.get('ts', '')),
        is_success=SUCCESS_FLAG in raw_text,
    )


def build_page_model(title: str, messages: Sequence[StatusMessage]) -> PageModel:
    """Assemble the page from newest-first messages.

    Index 0 is exempt from the success filter; every later success message is
    dropped from the history.
    """
    if not messages:
        raise UpstreamUnavailable("slack", "channel history is empty")

    latest = messages[0]
    history = [message for message in messages[1:] if not message.is_success]
    return PageModel(title=title, latest=latest, history=history)


class StatusHistoryReader:
    """Fetches and normalizes the configured channel's recent messages."""

    def __init__(self, connection, channel: str, logger=None):
        self.connection = connection
        self.channel = channel
        self.logger = logger or get_module_logger("Service.Slack.StatusHistory")

    def fetch_latest(self, count: int) -> List[StatusMessage]:
        """Newest-first normalized messages; raises UpstreamUnavailable."""
        raw_messages = self.connection.get_channel_history(self.channel, count)
        messages = [normalize_message(raw) for raw in raw_messages]
        self.logger.debug(f"Normalized {len(messages)} status message(s)")
        return messages

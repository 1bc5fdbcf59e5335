"""
Slack Connection Management
File: services/slack/connection.py

Thin Slack Web API client for reading channel history. One session is shared
by all request threads.
"""
from typing import Any, Dict, List, Optional

import requests

from services.error_handling import UpstreamUnavailable
from utils.logger import get_module_logger


class SlackConnection:
    """Reads messages from a Slack channel via ``conversations.history``."""

    def __init__(self, token: str, api_url: str = "https://slack.com/api",
                 timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.logger = get_module_logger("Service.Slack.Connection")
        self.api_url = api_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self._setup_session(token)

    def _setup_session(self, token: str):
        """Setup requests session with default headers."""
        self.session.headers.update({
            'User-Agent': 'StatusPage/1.0.0',
            'Authorization': f'Bearer {token}',
        })

    def get_channel_history(self, channel: str, count: int) -> List[Dict[str, Any]]:
        """Return the newest ``count`` raw messages of ``channel``, newest first."""
        url = f"{self.api_url}/conversations.history"
        try:
            response = self.session.get(
                url,
                params={'channel': channel, 'limit': count},
                timeout=self.timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.RequestException as exc:
            raise UpstreamUnavailable("slack", f"history request failed: {exc}", exc) from exc
        except ValueError as exc:
            raise UpstreamUnavailable("slack", "history response was not JSON", exc) from exc

        if not payload.get('ok'):
            raise UpstreamUnavailable("slack", f"history request rejected: {payload.get('error', 'unknown_error')}")

        messages = payload.get('messages') or []
        self.logger.debug(f"Fetched {len(messages)} message(s) from channel {channel}")
        return messages[:count]

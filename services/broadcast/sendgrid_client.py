"""
SendGrid Connection Management
File: services/broadcast/sendgrid_client.py

Submits single HTML emails through the SendGrid v3 mail/send endpoint.
"""
from typing import Optional

import requests

from services.error_handling import UpstreamUnavailable
from utils.logger import get_module_logger


class SendGridConnection:
    """Transactional email client shared by all delivery workers."""

    def __init__(self, api_key: str, api_url: str = "https://api.sendgrid.com/v3",
                 timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.logger = get_module_logger("Service.Broadcast.SendGrid")
        self.api_url = api_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': 'StatusPage/1.0.0',
            'Authorization': f'Bearer {api_key}',
            'Content-Type': 'application/json',
        })

    @staticmethod
    def build_payload(to: str, from_address: str, subject: str, html: str) -> dict:
        return {
            'personalizations': [{'to': [{'email': to}]}],
            'from': {'email': from_address},
            'subject': subject,
            'content': [{'type': 'text/html', 'value': html}],
        }

    def send(self, to: str, from_address: str, subject: str, html: str) -> None:
        """Send one message; raises UpstreamUnavailable when SendGrid refuses it."""
        payload = self.build_payload(to, from_address, subject, html)
        try:
            response = self.session.post(f"{self.api_url}/mail/send", json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            raise UpstreamUnavailable("sendgrid", f"send to {to} failed: {exc}", exc) from exc

        if not 200 <= response.status_code < 300:
            raise UpstreamUnavailable(
                "sendgrid",
                f"send to {to} rejected: HTTP {response.status_code} {response.text}",
            )

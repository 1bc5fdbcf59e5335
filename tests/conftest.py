"""Pytest configuration and fixtures for status page testing."""

import pytest
import redis

from app import create_app
from config.config import TestingConfig
from services.error_handling import UpstreamUnavailable


def slack_message(text, ts="1700000000.000100"):
    """Raw message shaped like a conversations.history entry."""
    return {"type": "message", "text": text, "ts": ts}


class FakeRedis:
    """In-memory stand-in for the handful of Redis commands the app uses."""

    def __init__(self):
        self.sets = {}
        self.values = {}
        self.fail = False

    def _check(self):
        if self.fail:
            raise redis.ConnectionError("Connection refused")

    def sadd(self, key, member):
        self._check()
        members = self.sets.setdefault(key, set())
        if member in members:
            return 0
        members.add(member)
        return 1

    def srem(self, key, member):
        self._check()
        members = self.sets.get(key, set())
        if member not in members:
            return 0
        members.discard(member)
        return 1

    def smembers(self, key):
        self._check()
        return set(self.sets.get(key, set()))

    def set(self, key, value):
        self._check()
        self.values[key] = value
        return True


class FakeSlack:
    """Scripted channel history; newest message first."""

    def __init__(self, messages=None):
        self.messages = list(messages or [])
        self.error = None
        self.calls = []

    def get_channel_history(self, channel, count):
        self.calls.append((channel, count))
        if self.error is not None:
            raise self.error
        return self.messages[:count]


class FakeEmailClient:
    """Records sends; addresses in ``fail_for`` are rejected."""

    def __init__(self):
        self.sent = []
        self.fail_for = set()

    def send(self, to, from_address, subject, html):
        if to in self.fail_for:
            raise UpstreamUnavailable("sendgrid", f"send to {to} rejected: HTTP 400")
        self.sent.append({"to": to, "from": from_address, "subject": subject, "html": html})


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def fake_slack():
    return FakeSlack([
        slack_message("success: all good", "1700000300.000100"),
        slack_message("database degraded", "1700000200.000100"),
        slack_message("success: recovered", "1700000100.000100"),
        slack_message("api latency elevated", "1700000000.000100"),
    ])


@pytest.fixture
def fake_email():
    return FakeEmailClient()


@pytest.fixture
def app(fake_redis, fake_slack, fake_email):
    app = create_app(
        TestingConfig,
        redis_client=fake_redis,
        slack_connection=fake_slack,
        email_client=fake_email,
    )
    yield app
    app.extensions['status_page'].shutdown(wait=True)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def services(app):
    return app.extensions['status_page']

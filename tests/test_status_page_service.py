"""Tests for the request-level status page operations."""

import logging

import pytest

from services.error_handling import UpstreamUnavailable
from services.slack import StatusHistoryReader
from services.status_page import StatusPageService
from services.store import StatusStore, SubscriberStore
from tests.conftest import FakeRedis, FakeSlack, slack_message


class StubBroadcaster:
    def __init__(self):
        self.calls = 0

    def broadcast_latest(self):
        self.calls += 1
        return "queued"


class PageRenderer:
    def __init__(self):
        self.pages = []

    def __call__(self, template_name, page):
        self.pages.append((template_name, page))
        return f"<h1>{page.title}</h1><p>{page.latest.text}</p>"


@pytest.fixture
def redis_client():
    return FakeRedis()


@pytest.fixture
def slack():
    return FakeSlack([
        slack_message("success: all good"),
        slack_message("degraded"),
        slack_message("success: recovered"),
    ])


@pytest.fixture
def renderer():
    return PageRenderer()


@pytest.fixture
def service(redis_client, slack, renderer):
    return StatusPageService(
        StatusHistoryReader(slack, "C0STATUS"),
        SubscriberStore(redis_client),
        StatusStore(redis_client),
        StubBroadcaster(),
        renderer,
        title="Status Page",
        history_count=10,
    )


class TestRenderIndex:

    def test_renders_latest_and_filtered_history(self, service, slack, renderer):
        html = service.render_index()

        assert html == "<h1>Status Page</h1><p>all good</p>"
        assert slack.calls == [("C0STATUS", 10)]
        template_name, page = renderer.pages[0]
        assert template_name == "index.html"
        assert [m.text for m in page.history] == ["degraded"]

    def test_upstream_failure_renders_nothing_and_logs_once(self, service, slack, renderer, redis_client, caplog):
        redis_client.sets["email-subscribers"] = {"a@example.com"}
        redis_client.values["status"] = "previous"
        slack.error = UpstreamUnavailable("slack", "history request failed")

        with caplog.at_level(logging.DEBUG):
            html = service.render_index()

        assert html is None
        assert renderer.pages == []
        errors = [record for record in caplog.records if record.levelno == logging.ERROR]
        assert len(errors) == 1
        assert "history request failed" in errors[0].getMessage()
        assert redis_client.sets["email-subscribers"] == {"a@example.com"}
        assert redis_client.values["status"] == "previous"

    def test_empty_channel_renders_nothing(self, service, slack):
        slack.messages = []
        assert service.render_index() is None


class TestSubscriptions:

    def test_subscribe_adds_address(self, service, redis_client):
        assert service.handle_subscribe("a@example.com").ok
        assert redis_client.sets["email-subscribers"] == {"a@example.com"}

    def test_blank_subscribe_is_skipped(self, service, redis_client):
        result = service.handle_subscribe("")

        assert result.skipped
        assert "email-subscribers" not in redis_client.sets

    def test_unsubscribe_passes_empty_address_through(self, service, redis_client):
        redis_client.sets["email-subscribers"] = {"a@example.com"}

        assert service.handle_unsubscribe("").ok
        assert redis_client.sets["email-subscribers"] == {"a@example.com"}

    def test_list_subscribers_logs_each_address(self, service, caplog):
        service.handle_subscribe("a@example.com")
        service.handle_subscribe("b@example.com")

        with caplog.at_level(logging.INFO):
            emails = service.handle_list_subscribers()

        assert sorted(emails) == ["a@example.com", "b@example.com"]
        logged = [record.getMessage() for record in caplog.records]
        assert "a@example.com" in logged
        assert "b@example.com" in logged


class TestUpdateStatus:

    def test_stores_non_empty_status(self, service, redis_client):
        assert service.handle_update_status("maintenance at 5pm").ok
        assert redis_client.values["status"] == "maintenance at 5pm"

    def test_empty_status_leaves_previous_value(self, service, redis_client):
        redis_client.values["status"] = "previous"

        result = service.handle_update_status("")

        assert result.skipped
        assert redis_client.values["status"] == "previous"


def test_broadcast_delegates(service):
    assert service.handle_broadcast() == "queued"
    assert service.broadcaster.calls == 1

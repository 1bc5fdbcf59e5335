"""Tests for the Redis-backed subscriber set and status value."""

import logging

from services.store import StatusStore, SubscriberStore, parse_redis_address
from services.store.subscriber_store import SUBSCRIBERS_KEY
from tests.conftest import FakeRedis


class TestSubscriberStore:

    def test_add_twice_keeps_one_entry(self):
        store = SubscriberStore(FakeRedis())

        assert store.add("a@example.com").ok
        assert store.add("a@example.com").ok

        assert store.list() == ["a@example.com"]

    def test_list_is_empty_without_subscribers(self):
        assert SubscriberStore(FakeRedis()).list() == []

    def test_remove_absent_address_is_not_an_error(self):
        client = FakeRedis()
        store = SubscriberStore(client)
        store.add("a@example.com")

        result = store.remove("b@example.com")

        assert result.ok
        assert store.list() == ["a@example.com"]

    def test_remove_present_address(self):
        store = SubscriberStore(FakeRedis())
        store.add("a@example.com")
        store.add("b@example.com")

        store.remove("a@example.com")

        assert store.list() == ["b@example.com"]

    def test_uses_shared_set_key(self):
        client = FakeRedis()
        SubscriberStore(client).add("a@example.com")
        assert client.sets[SUBSCRIBERS_KEY] == {"a@example.com"}

    def test_add_failure_is_logged_not_raised(self, caplog):
        client = FakeRedis()
        client.fail = True
        store = SubscriberStore(client)

        with caplog.at_level(logging.ERROR):
            result = store.add("a@example.com")

        assert not result.ok
        assert result.error.service == "redis"
        assert "could not add subscriber" in caplog.text

    def test_list_failure_returns_empty(self, caplog):
        client = FakeRedis()
        client.fail = True

        with caplog.at_level(logging.ERROR):
            assert SubscriberStore(client).list() == []
        assert "Could not list subscribers" in caplog.text


class TestStatusStore:

    def test_set_has_no_expiry(self):
        client = FakeRedis()
        store = StatusStore(client)

        assert store.set("all good").ok
        assert client.values == {"status": "all good"}

    def test_set_failure_returns_failed_result(self):
        client = FakeRedis()
        client.fail = True

        result = StatusStore(client).set("down")

        assert not result.ok
        assert not result.skipped


class TestParseRedisAddress:

    def test_host_and_port(self):
        assert parse_redis_address("cache.internal:6380") == ("cache.internal", 6380)

    def test_defaults(self):
        assert parse_redis_address("") == ("localhost", 6379)
        assert parse_redis_address("cache.internal") == ("cache.internal", 6379)

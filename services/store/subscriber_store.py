"""
Module Name: subscriber_store.py
Author: Status Page Development Team
Created: Oct 19 2026
Description:
    Subscriber email set kept in Redis. Set semantics give uniqueness; Redis
    serializes concurrent SADD/SREM so nothing is locked locally.

Location:
    /services/store/subscriber_store.py

"""

from typing import List

import redis

from services.error_handling import OperationResult, UpstreamUnavailable
from utils.logger import get_module_logger

SUBSCRIBERS_KEY = "email-subscribers"


class SubscriberStore:
    """Add, remove and list subscriber addresses (best-effort)."""

    def __init__(self, client, key: str = SUBSCRIBERS_KEY, logger=None):
        self.client = client
        self.key = key
        self.logger = logger or get_module_logger("Service.Store.Subscribers")

    def add(self, email: str) -> OperationResult:
        """Insert an address; adding an existing member is a no-op."""
        try:
            added = self.client.sadd(self.key, email)
        except redis.RedisError as exc:
            error = UpstreamUnavailable("redis", f"could not add subscriber: {exc}", exc)
            self.logger.error(f"{error}")
            return OperationResult.failure("subscribe", error)

        if added:
            self.logger.info(f"Subscribed {email}")
        else:
            self.logger.debug(f"{email} already subscribed")
        return OperationResult.success("subscribe")

    def remove(self, email: str) -> OperationResult:
        """Delete an address; a missing member is not an error."""
        try:
            removed = self.client.srem(self.key, email)
        except redis.RedisError as exc:
            error = UpstreamUnavailable("redis", f"could not remove subscriber: {exc}", exc)
            self.logger.error(f"{error}")
            return OperationResult.failure("unsubscribe", error)

        if removed:
            self.logger.info(f"Unsubscribed {email}")
        return OperationResult.success("unsubscribe")

    def list(self) -> List[str]:
        """Return current subscribers in no particular order."""
        try:
            members = self.client.smembers(self.key)
        except redis.RedisError as exc:
            self.logger.error(f"Could not list subscribers: {exc}")
            return []
        return list(members or [])

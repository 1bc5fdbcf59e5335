"""Scalar ``status`` value posted through /update-status."""

import redis

from services.error_handling import OperationResult, UpstreamUnavailable
from utils.logger import get_module_logger

STATUS_KEY = "status"


class StatusStore:
    def __init__(self, client, key: str = STATUS_KEY, logger=None):
        self.client = client
        self.key = key
        self.logger = logger or get_module_logger("Service.Store.Status")

    def set(self, status: str) -> OperationResult:
        """Store the status with no expiry."""
        try:
            self.client.set(self.key, status)
        except redis.RedisError as exc:
            error = UpstreamUnavailable("redis", f"could not store status: {exc}", exc)
            self.logger.error(f"{error}")
            return OperationResult.failure("update-status", error)
        self.logger.info(f"Status updated: {status}")
        return OperationResult.success("update-status")


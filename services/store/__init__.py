"""
Store Service Package - Status Page

Redis-backed storage for the subscriber set and the posted status value.
"""

from .connection import create_redis_client, parse_redis_address
from .status_store import StatusStore
from .subscriber_store import SubscriberStore


__all__ = ['SubscriberStore', 'StatusStore', 'create_redis_client', 'parse_redis_address']

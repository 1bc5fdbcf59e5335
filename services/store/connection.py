"""
Redis Connection Management
File: services/store/connection.py

Builds the single Redis client shared by every request thread.
"""
from typing import Tuple

import redis

from utils.logger import get_module_logger

logger = get_module_logger("Service.Store.Connection")

DEFAULT_REDIS_PORT = 6379


def parse_redis_address(address: str) -> Tuple[str, int]:
    """Split a ``host:port`` address, defaulting the port to 6379."""
    address = (address or '').strip()
    if not address:
        return 'localhost', DEFAULT_REDIS_PORT

    host, sep, port = address.rpartition(':')
    if not sep:
        return address, DEFAULT_REDIS_PORT
    try:
        return host or 'localhost', int(port)
    except ValueError:
        raise ValueError(f"Invalid Redis port in address '{address}'")


def create_redis_client(address: str, password: str = '', db: int = 0) -> redis.Redis:
    """Create a Redis client; the connection pool is thread-safe and shared."""
    host, port = parse_redis_address(address)
    client = redis.Redis(
        host=host,
        port=port,
        password=password or None,
        db=db,
        decode_responses=True,
    )
    logger.info(f"Redis client configured for {host}:{port} (db {db})")
    return client

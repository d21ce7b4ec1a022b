"""Testing fixtures and helpers for connector implementations."""
from __future__ import annotations

import random
from typing import Any
from typing import Generator
from unittest import mock

import pytest

from siblings.connectors.local import LocalConnector
from siblings.connectors.redis import RedisConnector
from testing.mocked.redis import MockStrictRedis


class CountingConnector(LocalConnector):
    """Local connector that records the keys read with `get()`."""

    def __init__(self, store_dict: dict[str, bytes] | None = None) -> None:
        super().__init__(store_dict)
        self.reads: list[str] = []

    def get(self, key: str) -> bytes | None:
        """Get the bytes associated with the key and record the read."""
        self.reads.append(key)
        return super().get(key)


class UnreachableConnector(LocalConnector):
    """Local connector whose reads always fail like a lost connection."""

    def get(self, key: str) -> bytes | None:
        """Raise a connection error."""
        raise ConnectionError(f'Store unreachable while reading {key}.')


@pytest.fixture()
def local_connector() -> Generator[CountingConnector, None, None]:
    """Counting local connector fixture."""
    with CountingConnector() as connector:
        yield connector


@pytest.fixture()
def redis_connector() -> Generator[RedisConnector, None, None]:
    """RedisConnector fixture backed by a mocked Redis server.

    Every `redis.StrictRedis` created while the fixture is active shares the
    same data so separate connectors behave like clients of one server.
    """
    data: dict[str, Any] = {}

    def create_mocked_redis(*args: Any, **kwargs: Any) -> MockStrictRedis:
        return MockStrictRedis(data, *args, **kwargs)

    with mock.patch('redis.StrictRedis', side_effect=create_mocked_redis):
        port = random.randint(5500, 5999)
        with RedisConnector('localhost', port) as connector:
            yield connector

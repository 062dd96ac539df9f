"""Feature-level fixtures for cache backend tests."""

from unittest.mock import MagicMock

import pytest
import redis

from infrastructure.cache import RedisCache


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def mock_redis_client():
    """MagicMock standing in for a redis.Redis client."""
    return MagicMock(spec=redis.Redis)


@pytest.fixture
def redis_cache(mock_redis_client):
    return RedisCache(mock_redis_client)

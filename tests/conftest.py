import threading
import pytest
import structlog
from unittest.mock import MagicMock
from fastapi import FastAPI
from fastapi.testclient import TestClient

from shortlink.main import app
from shortlink.services.link_store import LinkStore, get_link_store


class InMemoryRedis:
    """Thread-safe stand-in for the subset of redis.Redis the store uses."""

    def __init__(self):
        self._data = {}
        self._lock = threading.Lock()

    def incrby(self, key, amount=1):
        with self._lock:
            value = int(self._data.get(key, 0)) + amount
            self._data[key] = str(value)
            return value

    def set(self, key, value):
        with self._lock:
            self._data[key] = value
            return True

    def get(self, key):
        with self._lock:
            return self._data.get(key)

    def delete(self, *keys):
        with self._lock:
            return sum(1 for key in keys if self._data.pop(key, None) is not None)

    def ping(self):
        return True


@pytest.fixture(autouse=True)
def reset_structlog():
    """setup_logging caches loggers on first use; start every test from the defaults."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def fake_redis():
    return InMemoryRedis()


@pytest.fixture
def mock_redis():
    """MagicMock redis client with empty-backend defaults."""
    redis_mock = MagicMock()
    redis_mock.incrby.return_value = 1
    redis_mock.set.return_value = True
    redis_mock.get.return_value = None
    redis_mock.delete.return_value = 0
    redis_mock.ping.return_value = True
    return redis_mock


@pytest.fixture
def store(fake_redis):
    return LinkStore(fake_redis, counter_key="next.url.id", key_prefix="link:")


@pytest.fixture
def test_app(store) -> FastAPI:
    app.dependency_overrides[get_link_store] = lambda: store
    yield app
    app.dependency_overrides = {}


@pytest.fixture
def client(test_app):
    return TestClient(test_app, raise_server_exceptions=False)

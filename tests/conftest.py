import json
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest

from netlocale import hooks
from netlocale.services.remote_fetcher import FetchResponse
from netlocale.services.resolution_engine import LoaderConfig, ResolutionEngine

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)
BASE_URL = "https://cdn.example.com/translations/"


class MemoryCacheStore:
    """In-memory cache whose timestamps are set explicitly by tests."""

    def __init__(self):
        self.entries: dict[str, tuple[str, datetime]] = {}
        self.writes: list[tuple[str, str]] = []
        self.now = NOW

    def put(self, key, content, age=timedelta(0)):
        self.entries[key] = (content, self.now - age)

    def exists(self, key):
        return key in self.entries

    def last_modified(self, key):
        return self.entries[key][1]

    def read(self, key):
        return self.entries[key][0]

    def write(self, key, content):
        self.writes.append((key, content))
        self.entries[key] = (content, self.now)


class MemoryAssetStore:
    def __init__(self, files=None):
        self.files = dict(files or {})
        self.reads: list[str] = []

    def read(self, path):
        self.reads.append(path)
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path]


@pytest.fixture(autouse=True)
def _clean_hooks():
    hooks.clear()
    yield
    hooks.clear()


@pytest.fixture
def cache():
    return MemoryCacheStore()


@pytest.fixture
def assets():
    return MemoryAssetStore(
        {
            "assets/translations/en.json": '{"greeting": "Hello (bundled)"}',
            "assets/translations/ar.json": '{"greeting": "مرحبا (bundled)"}',
        }
    )


@pytest.fixture
def fetcher():
    mock = AsyncMock()
    body = json.dumps({"greeting": "Hello (remote)"}).encode("utf-8")
    mock.get = AsyncMock(return_value=FetchResponse(status_code=200, body=body))
    return mock


@pytest.fixture
def connectivity():
    oracle = AsyncMock()
    oracle.is_reachable = AsyncMock(return_value=True)
    return oracle


@pytest.fixture
def loader_config():
    return LoaderConfig(
        base_url_resolver=lambda _locale: BASE_URL,
        bundled_path_prefix="assets/translations",
        timeout=timedelta(seconds=1),
        cache_freshness_window=timedelta(days=1),
    )


@pytest.fixture
def engine(loader_config, cache, fetcher, connectivity, assets):
    return ResolutionEngine(
        loader_config,
        cache=cache,
        fetcher=fetcher,
        connectivity=connectivity,
        assets=assets,
        clock=lambda: cache.now,
    )

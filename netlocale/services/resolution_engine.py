"""Translation resolution: fresh cache, then network, then stale cache, then bundled assets."""

import asyncio
import enum
import json
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, Protocol

from netlocale import hooks
from netlocale.config import Settings
from netlocale.locale_keys import validate_locale_key
from netlocale.services.remote_fetcher import FetchResponse

_log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = timedelta(seconds=30)
DEFAULT_CACHE_DURATION = timedelta(days=1)


class TranslationLoadError(ValueError):
    """Raised when even the bundled assets cannot provide a locale."""


class Tier(enum.StrEnum):
    FRESH_CACHE = "fresh_cache"
    NETWORK = "network"
    STALE_CACHE = "stale_cache"
    BUNDLED = "bundled"


class ConnectivityOracle(Protocol):
    async def is_reachable(self) -> bool: ...


class RemoteFetcher(Protocol):
    async def get(self, url: str) -> FetchResponse: ...


class LocalCacheStore(Protocol):
    def exists(self, key: str) -> bool: ...

    def last_modified(self, key: str) -> datetime: ...

    def read(self, key: str) -> str: ...

    def write(self, key: str, content: str) -> None: ...


class BundledAssetStore(Protocol):
    def read(self, path: str) -> str: ...


@dataclass(frozen=True)
class LoaderConfig:
    """Immutable engine configuration.

    ``base_url_resolver`` returns the URL prefix for a locale; the locale
    itself is appended to it to form the request URL.
    """

    base_url_resolver: Callable[[str], str]
    bundled_path_prefix: str
    timeout: timedelta = DEFAULT_TIMEOUT
    cache_freshness_window: timedelta = DEFAULT_CACHE_DURATION

    @classmethod
    def from_settings(cls, settings: Settings) -> "LoaderConfig":
        base_url = settings.translations_base_url
        return cls(
            base_url_resolver=lambda _key: base_url,
            bundled_path_prefix=settings.assets_path,
            timeout=timedelta(seconds=settings.fetch_timeout_seconds),
            cache_freshness_window=timedelta(seconds=settings.cache_duration_seconds),
        )


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _parse_document(text: str) -> dict[str, Any]:
    document = json.loads(text)
    if not isinstance(document, dict):
        raise ValueError(f"expected a JSON object, got {type(document).__name__}")
    return document


class ResolutionEngine:
    """Loads one locale's translation document from the best available source.

    Only the bundled tier can raise; every other failure falls through to
    the next tier.
    """

    def __init__(
        self,
        config: LoaderConfig,
        cache: LocalCacheStore,
        fetcher: RemoteFetcher,
        connectivity: ConnectivityOracle,
        assets: BundledAssetStore,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._config = config
        self._cache = cache
        self._fetcher = fetcher
        self._connectivity = connectivity
        self._assets = assets
        self._clock = clock

    @property
    def config(self) -> LoaderConfig:
        return self._config

    async def load(self, key: str) -> dict[str, Any]:
        key = validate_locale_key(str(key))

        if self._is_fresh(key):
            document = self._read_cache(key)
            if document is not None:
                return self._resolved(key, Tier.FRESH_CACHE, document)

        if await self._connectivity.is_reachable():
            document = await self._fetch(key)
            if document is not None:
                return self._resolved(key, Tier.NETWORK, document)

        if self._cache.exists(key):
            document = self._read_cache(key)
            if document is not None:
                return self._resolved(key, Tier.STALE_CACHE, document)

        return self._resolved(key, Tier.BUNDLED, self._read_bundled(key))

    def _resolved(self, key: str, tier: Tier, document: dict[str, Any]) -> dict[str, Any]:
        _log.info("Loaded translations for %s from %s", key, tier)
        self._notify(hooks.LOCALE_RESOLVED, locale=key, tier=tier)
        return document

    def _notify(self, event: str, **payload) -> None:
        try:
            hooks.emit(event, **payload)
        except Exception:
            _log.exception("Hook for %s failed (non-fatal)", event)

    def _is_fresh(self, key: str) -> bool:
        if not self._cache.exists(key):
            return False
        try:
            modified = self._cache.last_modified(key)
        except OSError:
            return False
        # Boundary is inclusive: an entry exactly at the window's edge is fresh.
        return self._clock() - modified <= self._config.cache_freshness_window

    def _read_cache(self, key: str) -> dict[str, Any] | None:
        try:
            text = self._cache.read(key)
        except (OSError, UnicodeDecodeError) as exc:
            _log.warning("Could not read cached translations for %s: %s", key, exc)
            return None
        if not text:
            return None
        try:
            return _parse_document(text)
        except ValueError as exc:
            _log.warning("Ignoring corrupt cached translations for %s: %s", key, exc)
            return None

    async def _fetch(self, key: str) -> dict[str, Any] | None:
        url = f"{self._config.base_url_resolver(key)}{key}"
        timeout = self._config.timeout.total_seconds()
        try:
            response = await asyncio.wait_for(self._fetcher.get(url), timeout=timeout)
            if response.status_code != 200:
                raise ValueError(f"HTTP {response.status_code}")
            if not response.body:
                raise ValueError("empty response body")
            text = response.body.decode("utf-8")
            document = _parse_document(text)
        except TimeoutError:
            return self._fetch_failed(key, url, f"timed out after {timeout:g}s")
        except Exception as exc:
            return self._fetch_failed(key, url, str(exc) or type(exc).__name__)

        try:
            self._cache.write(key, text)
        except OSError as exc:
            _log.warning("Could not cache translations for %s: %s", key, exc)
        else:
            self._notify(hooks.CACHE_WRITTEN, locale=key, url=url)
        return document

    def _fetch_failed(self, key: str, url: str, reason: str) -> None:
        _log.warning("Fetching translations for %s from %s failed: %s", key, url, reason)
        self._notify(hooks.FETCH_FAILED, locale=key, url=url, reason=reason)
        return None

    def _read_bundled(self, key: str) -> dict[str, Any]:
        prefix = self._config.bundled_path_prefix.rstrip("/")
        path = f"{prefix}/{key}.json" if prefix else f"{key}.json"
        try:
            return _parse_document(self._assets.read(path))
        except (OSError, ValueError) as exc:
            raise TranslationLoadError(
                f"No usable bundled translations for locale '{key}' at {path}"
            ) from exc

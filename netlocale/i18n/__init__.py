"""Asset-loader entry point for localization frameworks.

A localization layer asks an ``AssetLoader`` for the document of one
locale and never looks behind it. ``NetworkAssetLoader`` answers through a
``ResolutionEngine``: fresh cache, network, stale cache, bundled assets.
"""

import asyncio
from abc import ABC, abstractmethod
from typing import Any

from netlocale.config import Settings, settings
from netlocale.services.asset_store import DirectoryAssetStore, PackageAssetStore
from netlocale.services.cache_store import FileCacheStore
from netlocale.services.connectivity import SocketConnectivity, StaticConnectivity
from netlocale.services.remote_fetcher import HttpxFetcher
from netlocale.services.resolution_engine import LoaderConfig, ResolutionEngine

_default_loader: "NetworkAssetLoader | None" = None


class AssetLoader(ABC):
    @abstractmethod
    async def load(self, path: str, locale: str) -> dict[str, Any]:
        """Return the translation document for ``locale``."""

    async def locale_exists(self, path: str) -> bool:
        return True


class NetworkAssetLoader(AssetLoader):
    def __init__(self, engine: ResolutionEngine):
        self.engine = engine

    async def load(self, path: str, locale: str) -> dict[str, Any]:
        # ``path`` belongs to the generic loader contract; the engine has its own layout.
        return await self.engine.load(str(locale))


def create_loader(config: Settings | None = None) -> NetworkAssetLoader:
    """Wire a loader from settings: temp-dir cache, httpx fetcher, socket probe, bundled assets.

    Bundled assets come from package data when ``assets_package`` is set,
    otherwise from ``assets_root`` on disk.
    """
    config = config or settings
    if config.offline:
        connectivity = StaticConnectivity(False)
    else:
        connectivity = SocketConnectivity(
            host=config.connectivity_host,
            port=config.connectivity_port,
            timeout=config.connectivity_timeout_seconds,
        )
    engine = ResolutionEngine(
        LoaderConfig.from_settings(config),
        cache=FileCacheStore(config.cache_dir or None),
        fetcher=HttpxFetcher(),
        connectivity=connectivity,
        assets=_asset_store(config),
    )
    return NetworkAssetLoader(engine)


def _asset_store(config: Settings) -> DirectoryAssetStore | PackageAssetStore:
    if config.assets_package:
        return PackageAssetStore(config.assets_package)
    return DirectoryAssetStore(config.assets_root)


def get_loader() -> NetworkAssetLoader:
    """Return the process-wide loader built from the module settings."""
    global _default_loader
    if _default_loader is None:
        _default_loader = create_loader()
    return _default_loader


def get_translations(locale: str, loader: AssetLoader | None = None) -> dict[str, Any]:
    """Synchronous wrapper around ``AssetLoader.load`` for code without an event loop."""
    loader = loader or get_loader()
    return asyncio.run(loader.load("", locale))

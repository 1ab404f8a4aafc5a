"""
Load translations for one or more locales and print the example screen's strings.

Each locale goes through the full chain: fresh cache, network, stale cache,
then the bundled files under examples/assets/translations.  Run it twice to
see the second run served from the cache.
"""

import argparse
import asyncio
import logging
import os

from netlocale import hooks
from netlocale.config import settings
from netlocale.i18n import NetworkAssetLoader, create_loader
from netlocale.services.resolution_engine import Tier

SCREEN_KEYS = ["app_title", "welcome_message", "description", "select_language", "info_message"]

# ---------------------------------------------------------------------------
# CLI arguments
# ---------------------------------------------------------------------------

def parse_args():
    here = os.path.dirname(os.path.abspath(__file__))
    p = argparse.ArgumentParser(description="Resolve translation documents through the network asset loader")
    p.add_argument("locales", nargs="*", default=["en", "ar", "fr"])
    p.add_argument("--base-url", default=os.getenv("TRANSLATIONS_BASE_URL", settings.translations_base_url))
    p.add_argument("--timeout", type=float, default=settings.fetch_timeout_seconds)
    p.add_argument("--cache-duration", type=int, default=settings.cache_duration_seconds)
    p.add_argument("--cache-dir", default=settings.cache_dir or None)
    p.add_argument("--assets-root", default=here)
    p.add_argument("--assets-path", default="assets/translations")
    p.add_argument("--offline", action="store_true", default=settings.offline)
    p.add_argument("-v", "--verbose", action="store_true", default=settings.debug)
    return p.parse_args()


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def build_loader(args) -> NetworkAssetLoader:
    config = settings.model_copy(
        update={
            "translations_base_url": args.base_url,
            "fetch_timeout_seconds": args.timeout,
            "cache_duration_seconds": args.cache_duration,
            "cache_dir": args.cache_dir or "",
            "assets_root": args.assets_root,
            "assets_path": args.assets_path,
            "assets_package": "",
            "offline": args.offline,
        }
    )
    return create_loader(config)


async def run(args):
    loader = build_loader(args)
    sources: dict[str, Tier] = {}
    hooks.on(hooks.LOCALE_RESOLVED, lambda locale, tier: sources.__setitem__(locale, tier))

    for locale in args.locales:
        translations = await loader.load("", locale)
        print(f"\n[{locale}] served from {sources.get(locale, '?')}")
        for key in SCREEN_KEYS:
            print(f"  {key}: {translations.get(key, '<missing>')}")


def main():
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    asyncio.run(run(args))


if __name__ == "__main__":
    main()

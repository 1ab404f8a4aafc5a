import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Remote source
    translations_base_url: str = ""
    fetch_timeout_seconds: float = 30.0

    # Local cache
    cache_duration_seconds: int = 86400
    cache_dir: str = ""

    # Bundled fallback
    assets_root: str = "."
    assets_path: str = "assets/translations"
    assets_package: str = ""

    # Connectivity probe
    connectivity_host: str = "1.1.1.1"
    connectivity_port: int = 53
    connectivity_timeout_seconds: float = 1.5
    offline: bool = False

    # App
    debug: bool = False


settings = Settings()

_log = logging.getLogger(__name__)
if not settings.translations_base_url and not settings.offline:
    _log.warning(
        "TRANSLATIONS_BASE_URL is not set. "
        "Network fetches will fail and translations will come from cache or bundled assets."
    )

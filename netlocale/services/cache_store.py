"""Filesystem cache for downloaded translation files.

Entries live in ``<base_dir>/translations-res/<locale>.json``. The base
directory defaults to the system temp dir, so the OS may wipe entries at
any time; nothing here ever deletes them.
"""

import os
import tempfile
from datetime import UTC, datetime

from netlocale.locale_keys import validate_locale_key

CACHE_SUBDIR = "translations-res"


class FileCacheStore:
    def __init__(self, base_dir: str | None = None):
        self._base_dir = base_dir or tempfile.gettempdir()

    @property
    def directory(self) -> str:
        return os.path.join(self._base_dir, CACHE_SUBDIR)

    def path_for(self, key: str) -> str:
        return os.path.join(self.directory, f"{validate_locale_key(key)}.json")

    def exists(self, key: str) -> bool:
        return os.path.isfile(self.path_for(key))

    def last_modified(self, key: str) -> datetime:
        return datetime.fromtimestamp(os.stat(self.path_for(key)).st_mtime, UTC)

    def read(self, key: str) -> str:
        with open(self.path_for(key), "rb") as f:
            return f.read().decode("utf-8")

    def write(self, key: str, content: str) -> None:
        """Replace the entry for ``key`` atomically, creating the cache dir if needed."""
        path = self.path_for(key)
        os.makedirs(self.directory, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(content.encode("utf-8"))
            os.replace(tmp_path, path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

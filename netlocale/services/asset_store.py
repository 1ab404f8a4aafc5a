"""Read-only stores for translation files shipped with the application."""

import os
from importlib import resources


class DirectoryAssetStore:
    """Bundled assets laid out under a directory on disk."""

    def __init__(self, root: str = "."):
        self.root = root

    def read(self, path: str) -> str:
        with open(os.path.join(self.root, path), encoding="utf-8") as f:
            return f.read()


class PackageAssetStore:
    """Bundled assets shipped as package data of an importable package."""

    def __init__(self, package: str):
        self.package = package

    def read(self, path: str) -> str:
        resource = resources.files(self.package)
        for part in path.strip("/").split("/"):
            resource = resource.joinpath(part)
        return resource.read_text(encoding="utf-8")

"""Locale identifiers, used verbatim as cache file names and URL suffixes."""

import os


def validate_locale_key(key: str) -> str:
    """Return ``key`` unchanged, or raise ValueError if it cannot be a file name."""
    if not key or key in {".", ".."}:
        raise ValueError(f"Invalid locale key {key!r}")
    if "/" in key or "\\" in key or os.sep in key or "\x00" in key:
        raise ValueError(f"Invalid locale key {key!r}: path separators are not allowed")
    return key

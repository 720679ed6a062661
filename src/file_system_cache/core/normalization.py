"""Normalization helpers for base paths, extensions, TTLs and env defaults."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

DEFAULT_BASE_PATH = os.getenv("FILE_SYSTEM_CACHE_DIR", "./.cache")
DEFAULT_HASH = os.getenv("FILE_SYSTEM_CACHE_HASH", "sha1")
DEFAULT_TTL = os.getenv("FILE_SYSTEM_CACHE_TTL", "0")


def normalize_base_path(value: Optional[Union[str, Path]]) -> Path:
    if value is None or (isinstance(value, str) and not value.strip()):
        value = DEFAULT_BASE_PATH
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = Path.cwd() / path
    return Path(os.path.normpath(path))


def normalize_extension(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    value = value.strip().lstrip(".")
    return value or None


def normalize_hash(value: Optional[str]) -> str:
    if not value:
        value = DEFAULT_HASH
    return value.strip().lower()


def normalize_ttl(value: Optional[float]) -> float:
    if value is None:
        try:
            value = float(DEFAULT_TTL)
        except ValueError:
            return 0.0
    return max(float(value), 0.0)

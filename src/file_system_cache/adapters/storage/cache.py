"""JSON file cache: one file per key, hashed names, optional namespace and TTL."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from file_system_cache.adapters.storage.paths import build_path, scoped_paths
from file_system_cache.adapters.storage.repositories import (
    ensure_dir,
    list_file_names,
    path_exists,
    read_json,
    remove_file,
    write_text_atomic,
)
from file_system_cache.core.config import CacheConfig, load_config
from file_system_cache.core.envelope import decode, encode
from file_system_cache.core.errors import (
    CacheExpired,
    DirectoryCreateError,
    InvalidKeyError,
    InvalidSaveItemError,
    ReadFailureError,
    WriteFailureError,
)
from file_system_cache.core.hashing import HASH_ALGORITHMS, derive_key_token, is_nothing
from file_system_cache.core.models import LoadedFile, LoadResult, SaveItem, SaveResult, SetResult
from file_system_cache.core.schemas import CacheOptions

LOG = logging.getLogger(__name__)

_MISSING = object()

SaveInput = Union[SaveItem, Mapping[str, Any], None]


class FileSystemCache:
    """A cache that reads and writes JSON files under a single directory.

    Options (all optional):
        base_path:  Directory to read/write. Default ``./.cache``.
        ns:         A value, or list of values, hashed into a namespace that
                    scopes every key of this cache.
        extension:  File extension appended to every cache file.
        ttl:        Default time-to-live in seconds. ``0`` never expires.
        hash:       Hash algorithm used for keys and namespace. Default ``sha1``.

    Instances hold no locks. Two caches writing the same key race and the
    last write wins.
    """

    hash_algorithms = HASH_ALGORITHMS

    def __init__(
        self,
        options: Union[CacheOptions, Mapping[str, Any], None] = None,
        **overrides: Any,
    ) -> None:
        self.config: CacheConfig = load_config(options, **overrides)
        self.base_path_exists = False

    def __repr__(self) -> str:
        return f"FileSystemCache(base_path={str(self.base_path)!r}, ns={self.ns!r}, hash={self.hash!r})"

    @property
    def base_path(self) -> Path:
        return self.config.base_path

    @property
    def ns(self) -> Optional[str]:
        return self.config.namespace

    @property
    def extension(self) -> Optional[str]:
        return self.config.extension

    @property
    def hash(self) -> str:
        return self.config.hash_algorithm

    @property
    def ttl(self) -> float:
        return self.config.default_ttl

    def path(self, key: Any) -> Path:
        """Return the file path for ``key``. No I/O."""
        if is_nothing(key):
            raise InvalidKeyError("Path requires a cache key.")
        return build_path(self.base_path, derive_key_token(self.hash, key), self.ns, self.extension)

    async def file_exists(self, key: Any) -> bool:
        """Whether a file exists for ``key``, expired or not."""
        return await asyncio.to_thread(path_exists, self.path(key))

    async def ensure_base_path(self) -> None:
        if not self.base_path_exists:
            await asyncio.to_thread(self._create_base_path)

    def ensure_base_path_sync(self) -> None:
        if not self.base_path_exists:
            self._create_base_path()

    async def get(self, key: Any, default: Any = None) -> Any:
        """Read the value for ``key``.

        Returns ``default`` when the file is missing or expired; expired
        files are deleted.
        """
        return await asyncio.to_thread(self._read, self.path(key), default, True)

    def get_sync(self, key: Any, default: Any = None) -> Any:
        """Blocking read. Expired entries return ``default`` but stay on disk."""
        return self._read(self.path(key), default, False)

    async def set(self, key: Any, value: Any, ttl: Optional[float] = None) -> SetResult:
        path = self.path(key)
        payload = encode(value, self._effective_ttl(ttl))
        await self.ensure_base_path()
        await asyncio.to_thread(self._write, path, payload)
        return SetResult(path=path)

    def set_sync(self, key: Any, value: Any, ttl: Optional[float] = None) -> "FileSystemCache":
        path = self.path(key)
        payload = encode(value, self._effective_ttl(ttl))
        self.ensure_base_path_sync()
        self._write(path, payload)
        return self

    async def remove(self, key: Any) -> None:
        path = self.path(key)
        if await asyncio.to_thread(remove_file, path):
            LOG.debug("Removed cache entry %s", path)

    async def clear(self) -> None:
        """Delete every file in this cache's namespace."""
        paths = await self._scoped_paths()
        await asyncio.gather(*(asyncio.to_thread(remove_file, path) for path in paths))
        LOG.debug("Cleared %d cache entries from %s", len(paths), self.base_path)

    async def save(self, items: Union[SaveInput, Iterable[SaveInput]]) -> SaveResult:
        """Write several ``{key, value}`` items; paths come back in input order."""
        entries = _to_save_items(items)
        if not entries:
            return SaveResult(paths=[])
        await self.ensure_base_path()
        results = await asyncio.gather(*(self.set(item.key, item.value) for item in entries))
        return SaveResult(paths=[result.path for result in results])

    async def load(self) -> LoadResult:
        """Read every live entry in this cache's namespace."""
        paths = await self._scoped_paths()
        if not paths:
            return LoadResult(files=[])
        values = await asyncio.gather(
            *(asyncio.to_thread(self._read, path, _MISSING, True) for path in paths)
        )
        files = [LoadedFile(path=path, value=value) for path, value in zip(paths, values) if value is not _MISSING]
        return LoadResult(files=files)

    def _effective_ttl(self, ttl: Optional[float]) -> float:
        if isinstance(ttl, (int, float)) and not isinstance(ttl, bool):
            return float(ttl)
        return self.ttl

    def _create_base_path(self) -> None:
        try:
            ensure_dir(self.base_path)
        except OSError as exc:
            raise DirectoryCreateError(
                f"Failed to create cache directory: {self.base_path}. {exc}", self.base_path
            ) from exc
        self.base_path_exists = True

    def _read(self, path: Path, default: Any, prune: bool) -> Any:
        try:
            return decode(read_json(path))
        except FileNotFoundError:
            return default
        except CacheExpired:
            if prune and remove_file(path):
                LOG.info("Removed expired cache entry %s", path)
            return default
        except (OSError, ValueError) as exc:
            raise ReadFailureError(f"Failed to read cache value at: {path}. {exc}", path) from exc

    def _write(self, path: Path, payload: str) -> None:
        try:
            try:
                write_text_atomic(path, payload)
            except FileNotFoundError:
                # Directory removed after it was first ensured.
                ensure_dir(path.parent)
                write_text_atomic(path, payload)
        except OSError as exc:
            raise WriteFailureError(f"Failed to write cache value at: {path}. {exc}", path) from exc
        LOG.debug("Wrote cache entry %s", path)

    async def _scoped_paths(self) -> List[Path]:
        names = await asyncio.to_thread(list_file_names, self.base_path)
        return scoped_paths(self.base_path, names, self.ns, self.extension)


def _to_save_items(items: Union[SaveInput, Iterable[SaveInput]]) -> List[SaveItem]:
    if items is None:
        return []
    if isinstance(items, (SaveItem, Mapping)):
        items = [items]
    result: List[SaveItem] = []
    for item in items:
        if item is None:
            continue
        if isinstance(item, SaveItem):
            key, value = item.key, item.value
        elif isinstance(item, Mapping):
            key, value = item.get("key"), item.get("value")
        else:
            key = value = None
        if not key or not value:
            raise InvalidSaveItemError("Save items not valid, must be an array of {key, value} objects.")
        result.append(SaveItem(key=key, value=value))
    return result


def create_cache(
    options: Union[CacheOptions, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> FileSystemCache:
    return FileSystemCache(options, **overrides)

"""File system cache."""

from file_system_cache.adapters.storage.cache import FileSystemCache, create_cache
from file_system_cache.core.errors import (
    DirectoryCreateError,
    FileSystemCacheError,
    InvalidBasePathError,
    InvalidKeyError,
    InvalidOptionsError,
    InvalidSaveItemError,
    ReadFailureError,
    UnserializableValueError,
    UnsupportedHashError,
    WriteFailureError,
)
from file_system_cache.core.models import LoadedFile, LoadResult, SaveItem, SaveResult, SetResult
from file_system_cache.core.schemas import CacheOptions

__all__ = [
    "CacheOptions",
    "DirectoryCreateError",
    "FileSystemCache",
    "FileSystemCacheError",
    "InvalidBasePathError",
    "InvalidKeyError",
    "InvalidOptionsError",
    "InvalidSaveItemError",
    "LoadResult",
    "LoadedFile",
    "ReadFailureError",
    "SaveItem",
    "SaveResult",
    "SetResult",
    "UnserializableValueError",
    "UnsupportedHashError",
    "WriteFailureError",
    "create_cache",
]

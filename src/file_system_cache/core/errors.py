"""Custom exceptions for the file system cache."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class FileSystemCacheError(Exception):
    """Base error for cache failures."""


class InvalidOptionsError(FileSystemCacheError):
    """Raised when construction options fail validation."""


class InvalidKeyError(FileSystemCacheError):
    """Raised when a cache key is missing or empty."""


class InvalidBasePathError(FileSystemCacheError):
    """Raised when the base path exists but is not a directory."""


class UnsupportedHashError(FileSystemCacheError):
    """Raised when the configured hash algorithm is not available."""


class InvalidSaveItemError(FileSystemCacheError):
    """Raised when a batch save item lacks a key or a value."""


class UnserializableValueError(FileSystemCacheError):
    """Raised when a value cannot be stored as JSON."""


class CacheIOError(FileSystemCacheError):
    """I/O failure against a specific cache file or directory."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class ReadFailureError(CacheIOError):
    """Raised when an entry exists but cannot be read or decoded."""


class WriteFailureError(CacheIOError):
    """Raised when an entry cannot be written."""


class DirectoryCreateError(CacheIOError):
    """Raised when the base directory cannot be created."""


class CacheExpired(Exception):
    """Internal signal: the decoded entry is past its TTL."""


class EnvelopeError(ValueError):
    """Internal signal: a cache file does not hold a valid envelope."""

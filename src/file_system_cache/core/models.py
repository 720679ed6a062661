"""Shared models for cache entries and operation results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from pathlib import Path
from typing import Any, List


class EntryKind(Enum):
    PRIMITIVE = "Primitive"
    JSON = "Json"
    DATETIME = "Date"
    DATE = "LocalDate"

    @classmethod
    def of(cls, value: Any) -> "EntryKind":
        # datetime is a subclass of date
        if isinstance(value, datetime):
            return cls.DATETIME
        if isinstance(value, date):
            return cls.DATE
        if isinstance(value, (dict, list, tuple)):
            return cls.JSON
        return cls.PRIMITIVE


@dataclass(frozen=True)
class CacheEntry:
    value: Any
    kind: EntryKind
    created_at: datetime
    ttl: float = 0


@dataclass(frozen=True)
class SaveItem:
    key: Any
    value: Any


@dataclass(frozen=True)
class SetResult:
    path: Path


@dataclass(frozen=True)
class SaveResult:
    paths: List[Path] = field(default_factory=list)


@dataclass(frozen=True)
class LoadedFile:
    path: Path
    value: Any


@dataclass(frozen=True)
class LoadResult:
    files: List[LoadedFile] = field(default_factory=list)

"""JSON envelope encoding with type tags and TTL metadata.

Each cache file holds one document::

    {"value": ..., "typeTag": "Primitive|Json|Date|LocalDate",
     "createdAt": "<ISO timestamp>", "ttl": <seconds>}

Documents written by the older layout (``type``/``created`` keys) are
still readable.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional, Union

from file_system_cache.core.errors import CacheExpired, EnvelopeError, UnserializableValueError
from file_system_cache.core.models import CacheEntry, EntryKind


_EPOCH = datetime.fromtimestamp(0, tz=timezone.utc)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _normalize_iso(value: str) -> str:
    return value[:-1] + "+00:00" if value.endswith("Z") else value


def _parse_timestamp(value: Any) -> datetime:
    if not isinstance(value, str):
        raise EnvelopeError(f"Invalid createdAt timestamp: {value!r}")
    text = _normalize_iso(value.strip())
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise EnvelopeError(f"Invalid createdAt timestamp: {value!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_kind(tag: Any) -> Optional[EntryKind]:
    if not isinstance(tag, str):
        return None
    try:
        return EntryKind(tag)
    except ValueError:
        return None


def _serialize_value(value: Any, kind: EntryKind) -> Any:
    if kind in (EntryKind.DATETIME, EntryKind.DATE):
        return value.isoformat()
    return value


def encode(value: Any, ttl: float, now: Optional[datetime] = None) -> str:
    kind = EntryKind.of(value)
    payload = {
        "value": _serialize_value(value, kind),
        "typeTag": kind.value,
        "createdAt": (now or _utcnow()).isoformat(),
        "ttl": ttl,
    }
    try:
        return json.dumps(payload, ensure_ascii=True, allow_nan=False)
    except (TypeError, ValueError) as exc:
        raise UnserializableValueError(
            f"Value of type {type(value).__name__} cannot be cached as JSON: {exc}"
        ) from exc


def to_entry(raw: Mapping[str, Any]) -> CacheEntry:
    if not isinstance(raw, Mapping) or "value" not in raw:
        raise EnvelopeError("Cache file does not contain a value envelope.")
    created = raw.get("createdAt", raw.get("created"))
    ttl = raw.get("ttl") or 0
    if isinstance(ttl, bool) or not isinstance(ttl, (int, float)):
        raise EnvelopeError(f"Invalid ttl: {ttl!r}")
    kind = _parse_kind(raw.get("typeTag", raw.get("type")))
    return CacheEntry(
        value=raw["value"],
        kind=kind or EntryKind.PRIMITIVE,
        created_at=_parse_timestamp(created) if created is not None else _EPOCH,
        ttl=float(ttl),
    )


def is_expired(entry: Union[CacheEntry, Mapping[str, Any]], now: Optional[datetime] = None) -> bool:
    if not isinstance(entry, CacheEntry):
        entry = to_entry(entry)
    if entry.ttl <= 0:
        return False
    elapsed = ((now or _utcnow()) - entry.created_at).total_seconds()
    return elapsed > entry.ttl


def restore(entry: CacheEntry) -> Any:
    if entry.kind is EntryKind.DATETIME:
        return datetime.fromisoformat(_normalize_iso(entry.value))
    if entry.kind is EntryKind.DATE:
        return date.fromisoformat(entry.value)
    return entry.value


def decode(raw: Dict[str, Any], now: Optional[datetime] = None) -> Any:
    """Return the stored value, raising CacheExpired when past its TTL."""
    entry = to_entry(raw)
    if is_expired(entry, now=now):
        raise CacheExpired()
    try:
        return restore(entry)
    except (TypeError, ValueError) as exc:
        raise EnvelopeError(f"Cannot restore {entry.kind.value} value: {exc}") from exc

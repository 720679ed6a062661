"""Key and namespace hashing."""

from __future__ import annotations

import hashlib
from typing import Any, Iterable, List, Optional

HASH_ALGORITHMS = ("sha1", "sha256", "sha512")


def hash_exists(algorithm: str) -> bool:
    """Return True when ``algorithm`` yields a fixed-size hex digest."""
    if not algorithm or algorithm not in hashlib.algorithms_available:
        return False
    try:
        digest = hashlib.new(algorithm)
    except (TypeError, ValueError):
        return False
    return digest.digest_size > 0


def is_nothing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple, dict, set)):
        return len(value) == 0
    return False


def compact(values: Iterable[Any]) -> List[Any]:
    """Flatten nested lists/tuples and drop None and empty values."""
    result: List[Any] = []
    for value in values:
        if isinstance(value, (list, tuple)):
            result.extend(compact(value))
        elif is_nothing(value):
            continue
        else:
            result.append(value)
    return result


def derive_key_token(algorithm: str, *values: Any) -> Optional[str]:
    """Hash ``values`` in order into a hex token.

    Returns None when nothing is left after flattening, which callers
    treat as "no namespace".
    """
    parts = compact(values)
    if not parts:
        return None
    digest = hashlib.new(algorithm)
    for part in parts:
        digest.update(str(part).encode("utf-8"))
    return digest.hexdigest()

"""Cache file naming."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from file_system_cache.core.errors import InvalidKeyError

NAMESPACE_SEPARATOR = "-"


def build_path(
    base_path: Path,
    key_token: Optional[str],
    namespace_token: Optional[str] = None,
    extension: Optional[str] = None,
) -> Path:
    if not key_token:
        raise InvalidKeyError("Path requires a cache key.")
    name = key_token
    if namespace_token:
        name = f"{namespace_token}{NAMESPACE_SEPARATOR}{name}"
    if extension:
        name = f"{name}.{extension.lstrip('.')}"
    return base_path / name


def belongs_to_namespace(name: str, namespace_token: Optional[str], extension: Optional[str] = None) -> bool:
    # Hidden names are in-flight temp files from atomic writes.
    if not name or name.startswith("."):
        return False
    if namespace_token:
        return name.startswith(f"{namespace_token}{NAMESPACE_SEPARATOR}")
    # The extension may itself contain the separator.
    suffix = f".{extension.lstrip('.')}" if extension else ""
    if suffix and name.endswith(suffix):
        name = name[: -len(suffix)]
    return NAMESPACE_SEPARATOR not in name


def scoped_paths(
    base_path: Path,
    names: Iterable[str],
    namespace_token: Optional[str],
    extension: Optional[str] = None,
) -> List[Path]:
    return [base_path / name for name in names if belongs_to_namespace(name, namespace_token, extension)]

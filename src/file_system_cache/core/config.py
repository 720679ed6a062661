"""Configuration for a cache instance: base directory, namespace and defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pydantic import ValidationError

from file_system_cache.core.errors import InvalidBasePathError, InvalidOptionsError, UnsupportedHashError
from file_system_cache.core.hashing import derive_key_token, hash_exists
from file_system_cache.core.normalization import (
    normalize_base_path,
    normalize_extension,
    normalize_hash,
    normalize_ttl,
)
from file_system_cache.core.schemas import CacheOptions


@dataclass(frozen=True)
class CacheConfig:
    base_path: Path
    namespace: Optional[str]
    extension: Optional[str]
    hash_algorithm: str
    default_ttl: float

    @staticmethod
    def from_options(options: CacheOptions) -> "CacheConfig":
        base_path = normalize_base_path(options.base_path)
        if base_path.exists() and not base_path.is_dir():
            raise InvalidBasePathError(f"The basePath '{base_path}' is a file. It should be a folder.")

        algorithm = normalize_hash(options.hash)
        if not hash_exists(algorithm):
            raise UnsupportedHashError(f"Hash does not exist: {algorithm}")

        return CacheConfig(
            base_path=base_path,
            namespace=derive_key_token(algorithm, options.ns),
            extension=normalize_extension(options.extension),
            hash_algorithm=algorithm,
            default_ttl=normalize_ttl(options.ttl),
        )


def parse_options(
    options: Union[CacheOptions, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> CacheOptions:
    if isinstance(options, CacheOptions):
        data = options.model_dump(exclude_unset=True)
    else:
        data = dict(options or {})
    data.update(overrides)
    try:
        return CacheOptions(**data)
    except ValidationError as exc:
        raise InvalidOptionsError(str(exc)) from exc


def load_config(
    options: Union[CacheOptions, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> CacheConfig:
    return CacheConfig.from_options(parse_options(options, **overrides))

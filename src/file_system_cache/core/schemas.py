"""Construction options for the file system cache."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class CacheOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")

    base_path: Optional[Union[str, Path]] = None
    ns: Any = None
    extension: Optional[str] = None
    ttl: Optional[float] = Field(None, ge=0)
    hash: Optional[str] = Field(None, min_length=1)

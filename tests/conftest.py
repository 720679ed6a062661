"""
Pytest configuration and fixtures for file system cache tests.
"""

import json
from datetime import datetime, timedelta, timezone

import pytest

from file_system_cache import FileSystemCache


# ============================================================================
# Directory fixtures
# ============================================================================

@pytest.fixture
def base_path(tmp_path):
    """Cache directory that does not exist yet"""
    return tmp_path / "cache"


@pytest.fixture
def make_cache(base_path):
    """Factory for caches sharing the same base path"""
    def _make(**options):
        options.setdefault("base_path", base_path)
        return FileSystemCache(**options)

    return _make


@pytest.fixture
def cache(make_cache):
    """Cache with no namespace"""
    return make_cache()


# ============================================================================
# Envelope fixtures
# ============================================================================

@pytest.fixture
def write_envelope():
    """Write a raw envelope created ``age`` seconds ago"""
    def _write(path, value, ttl, age=0.0, type_tag="Primitive"):
        created = datetime.now(timezone.utc) - timedelta(seconds=age)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps({
                "value": value,
                "typeTag": type_tag,
                "createdAt": created.isoformat(),
                "ttl": ttl,
            }),
            encoding="utf-8",
        )
        return path

    return _write


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )

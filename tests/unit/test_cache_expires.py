"""
Unit tests for TTL expiry and self-healing reads
"""

import asyncio

import pytest


@pytest.mark.unit
class TestExpiry:
    """Test suite for lazily expiring entries"""

    @pytest.mark.asyncio
    async def test_unexpired_values_returned(self, make_cache):
        writer = make_cache(ttl=10)
        reader = make_cache(ttl=10)
        await writer.set("foo-1", "bar-1")
        await writer.set("foo-2", "bar-2", 0)
        await writer.set("foo-3", "bar-3", 10)

        assert await reader.get("foo-1") == "bar-1"
        assert await reader.get("foo-2") == "bar-2"
        assert await reader.get("foo-3") == "bar-3"

    @pytest.mark.asyncio
    async def test_expired_returns_default_and_deletes(self, cache, write_envelope):
        path = write_envelope(cache.path("old"), "stale", ttl=1, age=60)
        assert await cache.get("old", "fallback") == "fallback"
        assert not path.exists()

    @pytest.mark.asyncio
    async def test_zero_ttl_never_expires(self, cache, write_envelope):
        write_envelope(cache.path("forever"), "kept", ttl=0, age=10 ** 8)
        assert await cache.get("forever") == "kept"

    def test_get_sync_leaves_expired_file(self, cache, write_envelope):
        path = write_envelope(cache.path("old"), "stale", ttl=1, age=60)
        assert cache.get_sync("old", "fallback") == "fallback"
        assert path.exists()

    @pytest.mark.asyncio
    async def test_expired_entry_can_be_rewritten(self, cache, write_envelope):
        write_envelope(cache.path("key"), "stale", ttl=1, age=60)
        await cache.set("key", "fresh")
        assert await cache.get("key") == "fresh"

    @pytest.mark.slow
    @pytest.mark.asyncio
    async def test_expires_in_real_time(self, make_cache):
        writer = make_cache(ttl=0.3)
        reader = make_cache(ttl=0.3)
        await writer.set("number", 123)
        await writer.set("object", {"foo": 456}, 0.5)
        await writer.set("kept", "yes", 10)

        assert reader.get_sync("number") == 123
        await asyncio.sleep(1)

        assert await reader.get("number") is None
        assert await reader.get("object") is None
        assert await reader.get("kept") == "yes"
        assert reader.get_sync("number") is None

# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Tests for RedisCacheAdapter using a FakeRedis stub."""

from __future__ import annotations

from datetime import timedelta

import pytest

from easysession.cache.adapters.redis import RedisCacheAdapter
from easysession.cache.ports.outbound import CacheAdapter


class FakeRedis:
    """Minimal in-memory stub matching the redis.asyncio.Redis interface."""

    def __init__(self) -> None:
        self._store: dict[str, bytes] = {}
        self.expirations: dict[str, int | None] = {}
        self.pinged = False
        self.closed = False

    async def get(self, key: str) -> bytes | None:
        return self._store.get(key)

    async def set(self, key: str, value: bytes, px: int | None = None) -> None:
        self._store[key] = value
        self.expirations[key] = px

    async def ping(self) -> bool:
        self.pinged = True
        return True

    async def aclose(self) -> None:
        self.closed = True


class BrokenRedis(FakeRedis):
    async def get(self, key: str) -> bytes | None:
        raise ConnectionError("Connection refused")


class TestRedisCacheAdapter:
    @pytest.mark.asyncio
    async def test_protocol_compliance(self):
        """RedisCacheAdapter satisfies the CacheAdapter protocol."""
        adapter: CacheAdapter = RedisCacheAdapter(FakeRedis())
        assert isinstance(adapter, CacheAdapter)
        await adapter.put("x", 42)
        assert await adapter.get("x") == 42

    @pytest.mark.asyncio
    async def test_put_and_get(self):
        adapter = RedisCacheAdapter(FakeRedis())
        await adapter.put("easySession:abc", {"test": "1", "n": [1, 2]})
        assert await adapter.get("easySession:abc") == {"test": "1", "n": [1, 2]}

    @pytest.mark.asyncio
    async def test_get_missing_key(self):
        adapter = RedisCacheAdapter(FakeRedis())
        assert await adapter.get("no-such-key") is None

    @pytest.mark.asyncio
    async def test_values_are_stored_as_json(self):
        client = FakeRedis()
        adapter = RedisCacheAdapter(client)
        await adapter.put("key", {"a": 1})
        assert client._store["key"] == b'{"a": 1}'

    @pytest.mark.asyncio
    async def test_ttl_is_sent_in_milliseconds(self):
        client = FakeRedis()
        adapter = RedisCacheAdapter(client)
        await adapter.put("key", {}, ttl=timedelta(milliseconds=1500))
        assert client.expirations["key"] == 1500

    @pytest.mark.asyncio
    async def test_sub_millisecond_ttl_rounds_up(self):
        client = FakeRedis()
        adapter = RedisCacheAdapter(client)
        await adapter.put("key", {}, ttl=timedelta(microseconds=10))
        assert client.expirations["key"] == 1

    @pytest.mark.asyncio
    async def test_no_ttl(self):
        client = FakeRedis()
        adapter = RedisCacheAdapter(client)
        await adapter.put("key", {})
        assert client.expirations["key"] is None

    @pytest.mark.asyncio
    async def test_corrupt_value_reads_as_missing(self):
        client = FakeRedis()
        client._store["key"] = b"{not json"
        adapter = RedisCacheAdapter(client)
        assert await adapter.get("key") is None

    @pytest.mark.asyncio
    async def test_start_pings_and_stop_closes(self):
        client = FakeRedis()
        adapter = RedisCacheAdapter(client)
        await adapter.start()
        await adapter.stop()
        assert client.pinged is True
        assert client.closed is True

    @pytest.mark.asyncio
    async def test_connection_errors_propagate(self):
        adapter = RedisCacheAdapter(BrokenRedis())
        with pytest.raises(ConnectionError):
            await adapter.get("key")

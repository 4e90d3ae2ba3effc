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
"""In-memory session cache with TTL-based expiry."""

from __future__ import annotations

import asyncio
import copy
import heapq
import time
from datetime import timedelta
from typing import Any


class InMemoryCache:
    """Process-local session store for development, tests and single-worker apps.

    Every ``put`` and ``get`` first sweeps entries whose TTL has passed, so
    sessions that are never read again (one per cookie-less visitor) do not
    accumulate. Expiry times are kept in a min-heap ordered by deadline.

    Stored values are deep-copied in both directions, so a handler mutating
    its session after the response cannot change what is cached. Once
    :meth:`stop` is called every operation raises :class:`ConnectionError`
    until :meth:`start`, mirroring a networked client.
    """

    def __init__(self) -> None:
        self._store: dict[str, tuple[Any, float | None]] = {}
        self._deadlines: list[tuple[float, str]] = []
        self._lock = asyncio.Lock()
        self._running = True

    def __len__(self) -> int:
        return len(self._store)

    @property
    def is_running(self) -> bool:
        return self._running

    async def start(self) -> None:
        self._running = True

    async def stop(self) -> None:
        """Disconnect the client. Stored entries are kept."""
        self._running = False

    async def get(self, key: str) -> Any | None:
        """Return the session stored under *key*, or None if missing or expired."""
        self._ensure_running()
        async with self._lock:
            self._sweep(time.monotonic())
            entry = self._store.get(key)
            return None if entry is None else copy.deepcopy(entry[0])

    async def put(self, key: str, value: Any, ttl: timedelta | None = None) -> None:
        """Store *value* under *key*, replacing any previous entry."""
        self._ensure_running()
        now = time.monotonic()
        expires_at = now + ttl.total_seconds() if ttl is not None else None
        async with self._lock:
            self._sweep(now)
            self._store[key] = (copy.deepcopy(value), expires_at)
            if expires_at is not None:
                heapq.heappush(self._deadlines, (expires_at, key))

    def _sweep(self, now: float) -> None:
        while self._deadlines and self._deadlines[0][0] <= now:
            expires_at, key = heapq.heappop(self._deadlines)
            entry = self._store.get(key)
            # A later put may have replaced the entry with a new deadline.
            if entry is not None and entry[1] == expires_at:
                del self._store[key]

    def _ensure_running(self) -> None:
        if not self._running:
            raise ConnectionError("In-memory cache client is stopped")

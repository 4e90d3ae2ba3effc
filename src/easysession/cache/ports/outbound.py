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
"""Outbound port to the store holding session data."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import timedelta
from typing import Any, Protocol, runtime_checkable

SessionData = Mapping[str, Any]


@runtime_checkable
class CacheAdapter(Protocol):
    """Key-value store the coordinator reads and writes session data through.

    Keys are ``"<segment>:<identifier>"`` strings. Any failure to reach the
    store must surface as an exception; the coordinator reports it as
    ``CacheUnavailableException`` and never retries.
    """

    async def get(self, key: str) -> SessionData | Any | None:
        """Return the data stored under *key*, or ``None`` on a miss or after expiry."""
        ...

    async def put(self, key: str, value: SessionData, ttl: timedelta | None = None) -> None:
        """Store *value* under *key*, replacing any previous entry, for *ttl*."""
        ...

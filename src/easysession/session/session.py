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
"""Session — the per-request view of a session's data."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any


class Session(MutableMapping[str, Any]):
    """A mutable mapping of JSON-serializable session values.

    Compares equal to any mapping holding the same items, so
    ``session == {}`` holds for an empty session.

    Attributes:
        is_new: ``True`` if no stored session was loaded for this request.
        modified: ``True`` once any value is set or removed.

    Both flags are for handlers only. The coordinator writes the session
    back on every response whatever their values.
    """

    def __init__(self, data: Mapping[str, Any] | None = None, *, is_new: bool = False) -> None:
        self._data: dict[str, Any] = dict(data) if data is not None else {}
        self._is_new = is_new
        self._modified = False

    @property
    def is_new(self) -> bool:
        return self._is_new

    @property
    def modified(self) -> bool:
        return self._modified

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._modified = True

    def __delitem__(self, key: str) -> None:
        del self._data[key]
        self._modified = True

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Session({self._data!r}, is_new={self._is_new})"

    def to_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the session data."""
        return dict(self._data)

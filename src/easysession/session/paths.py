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
"""Request paths exempt from session handling."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class LiteralPath:
    """Exempts exactly one path."""

    value: str


@dataclass(frozen=True)
class PatternPath:
    """Exempts every path the regular expression finds a match in."""

    pattern: re.Pattern[str]

    @classmethod
    def compile(cls, expression: str) -> PatternPath:
        return cls(re.compile(expression))


IgnorePath = LiteralPath | PatternPath


def as_ignore_path(entry: str | re.Pattern[str] | IgnorePath) -> IgnorePath:
    """Coerce a plain string or compiled regex into an :data:`IgnorePath`."""
    if isinstance(entry, LiteralPath | PatternPath):
        return entry
    if isinstance(entry, re.Pattern):
        return PatternPath(entry)
    if isinstance(entry, str):
        return LiteralPath(entry)
    raise TypeError(f"Unsupported ignore path entry: {entry!r}")


def matches(entry: IgnorePath, path: str) -> bool:
    if isinstance(entry, PatternPath):
        return entry.pattern.search(path) is not None
    return entry.value == path


class PathMatcher:
    """Decides whether a request path skips session handling entirely."""

    def __init__(self, entries: Iterable[str | re.Pattern[str] | IgnorePath] = ()) -> None:
        self._entries: tuple[IgnorePath, ...] = tuple(as_ignore_path(e) for e in entries)

    @property
    def entries(self) -> tuple[IgnorePath, ...]:
        return self._entries

    def should_ignore(self, path: str) -> bool:
        return any(matches(entry, path) for entry in self._entries)

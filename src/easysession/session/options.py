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
"""Typed session options, validated once at construction."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from datetime import timedelta
from typing import Any

from easysession.core.config import Config
from easysession.kernel.exceptions import ConfigurationException
from easysession.session.paths import IgnorePath, PatternPath, as_ignore_path

# Largest duration a 32-bit signed millisecond timer can hold.
MAX_EXPIRES_IN = 2**31 - 1

DEFAULT_COOKIE_NAME = "easySession"


@dataclass(frozen=True)
class CookieOptions:
    """Attributes forwarded verbatim to the cookie setter."""

    secure: bool = True
    http_only: bool = True
    same_site: str | None = "lax"
    path: str | None = "/"
    domain: str | None = None
    max_age: int | None = None


@dataclass(frozen=True)
class CacheOptions:
    """Cache entry settings.

    Attributes:
        segment: Namespace prepended to every cache key.
        expires_in: Entry TTL in milliseconds. Derived from the session
            ``expires_in`` when left unset.
    """

    segment: str = DEFAULT_COOKIE_NAME
    expires_in: int | None = None


@dataclass(frozen=True)
class SessionOptions:
    """Immutable configuration for one :class:`SessionCoordinator`.

    Attributes:
        algorithm: hashlib digest name used for the HMAC.
        key: HMAC secret. Identifiers are unauthenticated without it.
        expires_in: Identifier validity window in milliseconds.
        size: Number of random bytes per identifier.
        cookie_name: Name of the cookie carrying the identifier.
        cookie: Cookie attributes.
        cache: Cache entry settings.
        ignore_paths: Literal paths and regex patterns exempt from sessions.

    Raises:
        ConfigurationException: if ``expires_in`` is set without ``key``, or
            a size or duration is not positive.
    """

    algorithm: str = "sha256"
    key: str | bytes | None = None
    expires_in: int | None = None
    size: int = 16
    cookie_name: str = DEFAULT_COOKIE_NAME
    cookie: CookieOptions = field(default_factory=CookieOptions)
    cache: CacheOptions = field(default_factory=CacheOptions)
    ignore_paths: tuple[IgnorePath, ...] = ()

    def __post_init__(self) -> None:
        if not self.key:
            object.__setattr__(self, "key", None)

        if self.expires_in is not None and self.key is None:
            raise ConfigurationException(
                'The "expires_in" option requires the "key" option',
                code="SESSION_KEY_REQUIRED",
            )
        if self.expires_in is not None and self.expires_in <= 0:
            raise ConfigurationException(
                f"expires_in must be a positive number of milliseconds, got {self.expires_in}",
                code="SESSION_INVALID_OPTION",
                context={"option": "expires_in"},
            )
        if self.size <= 0:
            raise ConfigurationException(
                f"size must be a positive number of bytes, got {self.size}",
                code="SESSION_INVALID_OPTION",
                context={"option": "size"},
            )
        if self.cache.expires_in is not None and self.cache.expires_in <= 0:
            raise ConfigurationException(
                f"cache.expires_in must be a positive number of milliseconds, got {self.cache.expires_in}",
                code="SESSION_INVALID_OPTION",
                context={"option": "cache.expires_in"},
            )

        if self.cache.expires_in is None:
            ttl = min(self.expires_in or MAX_EXPIRES_IN, MAX_EXPIRES_IN)
            object.__setattr__(self, "cache", replace(self.cache, expires_in=ttl))

        try:
            paths = tuple(as_ignore_path(p) for p in self.ignore_paths)
        except TypeError as exc:
            raise ConfigurationException(str(exc), code="SESSION_INVALID_OPTION") from exc
        object.__setattr__(self, "ignore_paths", paths)

    @property
    def key_bytes(self) -> bytes | None:
        if self.key is None:
            return None
        return self.key if isinstance(self.key, bytes) else self.key.encode("utf-8")

    @property
    def cache_ttl(self) -> timedelta:
        return timedelta(milliseconds=self.cache.expires_in or MAX_EXPIRES_IN)

    @property
    def min_size(self) -> int:
        """Shortest decoded identifier that can possibly be valid."""
        return self.size + 8 if self.expires_in is not None else self.size

    @classmethod
    def from_config(cls, config: Config) -> SessionOptions:
        """Build options from the ``easysession.session`` section of *config*."""
        prefix = "easysession.session"
        cookie = config.get_section(f"{prefix}.cookie")
        cache = config.get_section(f"{prefix}.cache")

        ignore_paths: list[IgnorePath] = [
            as_ignore_path(str(p)) for p in config.get(f"{prefix}.ignore-paths") or []
        ]
        try:
            ignore_paths.extend(
                PatternPath.compile(str(p)) for p in config.get(f"{prefix}.ignore-patterns") or []
            )
        except re.error as exc:
            raise ConfigurationException(
                f"Invalid ignore pattern: {exc}", code="SESSION_INVALID_OPTION"
            ) from exc

        return cls(
            algorithm=str(config.get(f"{prefix}.algorithm", "sha256")),
            key=_optional_str(config.get(f"{prefix}.key")),
            expires_in=_optional_int(config.get(f"{prefix}.expires-in")),
            size=int(config.get(f"{prefix}.size", 16)),
            cookie_name=str(config.get(f"{prefix}.cookie-name", DEFAULT_COOKIE_NAME)),
            cookie=CookieOptions(
                secure=_as_bool(cookie.get("secure", True)),
                http_only=_as_bool(cookie.get("http-only", True)),
                same_site=cookie.get("same-site", "lax"),
                path=cookie.get("path", "/"),
                domain=cookie.get("domain"),
                max_age=_optional_int(cookie.get("max-age")),
            ),
            cache=CacheOptions(
                segment=str(cache.get("segment", DEFAULT_COOKIE_NAME)),
                expires_in=_optional_int(config.get(f"{prefix}.cache.expires-in")),
            ),
            ignore_paths=tuple(ignore_paths),
        )


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


def _optional_int(value: Any) -> int | None:
    if value is None or value == "":
        return None
    return int(value)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes")
    return bool(value)

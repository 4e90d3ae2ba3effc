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
"""SessionCoordinator — loads and persists session data around a request."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from easysession.cache.ports.outbound import CacheAdapter
from easysession.kernel.exceptions import CacheUnavailableException, EasySessionException
from easysession.logging.noop import NoOpLogger
from easysession.session.codec import SessionIdCodec
from easysession.session.context import SessionContext
from easysession.session.options import SessionOptions
from easysession.session.paths import PathMatcher
from easysession.session.session import Session
from easysession.session.verifier import SessionIdVerifier


class SessionCoordinator:
    """Drives the two request-lifecycle hooks of the session layer.

    ``on_request_start`` runs before authentication: it resolves the
    incoming cookie and loads session data from the cache.
    ``on_request_end`` runs before the response is sent: it issues an
    identifier for new sessions and writes the session data back.

    The host must await ``on_request_start`` to completion before calling
    ``on_request_end`` for the same :class:`SessionContext`. All per-request
    state lives in the context; the coordinator itself is shared and
    read-only. Concurrent requests carrying the same identifier each write
    their own copy of the data; the last write wins.

    Invalid, expired or malformed identifiers never raise: the session
    silently starts over. Cache failures raise
    :class:`~easysession.kernel.exceptions.CacheUnavailableException` and
    identifier generation failures raise
    :class:`~easysession.kernel.exceptions.IdentifierGenerationException`.
    Neither is retried.
    """

    def __init__(
        self,
        options: SessionOptions,
        cache: CacheAdapter,
        logger: Any | None = None,
    ) -> None:
        self._options = options
        self._cache = cache
        self._logger = logger or NoOpLogger()
        self._codec = SessionIdCodec(options)
        self._verifier = SessionIdVerifier(self._codec, self._logger)
        self._paths = PathMatcher(options.ignore_paths)

    @property
    def options(self) -> SessionOptions:
        return self._options

    @property
    def codec(self) -> SessionIdCodec:
        return self._codec

    @property
    def verifier(self) -> SessionIdVerifier:
        return self._verifier

    def should_ignore(self, path: str) -> bool:
        return self._paths.should_ignore(path)

    def cache_key(self, session_id: str) -> str:
        return f"{self._options.cache.segment}:{session_id}"

    async def on_request_start(self, ctx: SessionContext) -> None:
        """Attach the session for *ctx*, loading it from the cache when the cookie is valid.

        Raises:
            CacheUnavailableException: if the cache read fails. No session is
                attached in that case.
        """
        if self.should_ignore(ctx.path):
            self._logger.debug("session_path_ignored", path=ctx.path)
            ctx.ignored = True
            return

        if not ctx.cookie:
            self._logger.debug("session_created")
            ctx.session = Session(is_new=True)
            return

        if not self._verifier.is_valid(ctx.cookie):
            self._logger.debug("session_cookie_rejected")
            ctx.clear_cookie = True
            ctx.session = Session(is_new=True)
            return

        ctx.session_id = ctx.cookie
        try:
            value = await self._cache.get(self.cache_key(ctx.session_id))
        except EasySessionException:
            raise
        except Exception as exc:
            self._logger.warning("session_cache_read_failed", error=str(exc), error_type=type(exc).__name__)
            raise CacheUnavailableException(
                "Session cache is unavailable",
                code="SESSION_CACHE_UNAVAILABLE",
                context={"operation": "get"},
            ) from exc

        if value is not None and not isinstance(value, Mapping):
            self._logger.warning("session_cache_value_discarded", value_type=type(value).__name__)
            value = None

        ctx.session = Session(value or {})
        self._logger.debug("session_loaded", cache_hit=value is not None)

    async def on_request_end(self, ctx: SessionContext) -> None:
        """Issue an identifier for new sessions and persist the session data.

        Raises:
            IdentifierGenerationException: if a new identifier cannot be built.
                The cache is not touched in that case.
            CacheUnavailableException: if the cache write fails.
        """
        if ctx.ignored:
            return

        if ctx.session_id is None:
            session_id = self._codec.build()
            self._logger.debug("session_cookie_issued")
            ctx.issue_cookie(session_id)
        else:
            session_id = ctx.session_id

        data = ctx.session.to_dict() if ctx.session is not None else {}
        try:
            await self._cache.put(self.cache_key(session_id), data, ttl=self._options.cache_ttl)
        except EasySessionException:
            raise
        except Exception as exc:
            self._logger.warning("session_cache_write_failed", error=str(exc), error_type=type(exc).__name__)
            raise CacheUnavailableException(
                "Session cache is unavailable",
                code="SESSION_CACHE_UNAVAILABLE",
                context={"operation": "put"},
            ) from exc

        self._logger.debug("session_saved", keys=len(data))

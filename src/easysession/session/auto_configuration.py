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
"""Session subsystem auto-configuration."""

from __future__ import annotations

import importlib
from typing import Any

from easysession.cache.ports.outbound import CacheAdapter
from easysession.core.config import Config
from easysession.logging.port import LoggingPort
from easysession.logging.structlog_adapter import StructlogAdapter
from easysession.session.coordinator import SessionCoordinator
from easysession.session.options import SessionOptions
from easysession.web.adapters.starlette.session_filter import SessionFilter

_LOGGER_NAME = "easysession.session"


class SessionAutoConfiguration:
    """Builds the cache adapter and session filter from :class:`Config`."""

    @staticmethod
    def is_available(module_name: str) -> bool:
        """Check if a Python package is importable."""
        try:
            importlib.import_module(module_name)
            return True
        except ImportError:
            return False

    @classmethod
    def detect_provider(cls) -> str:
        """Detect the best available cache provider."""
        if cls.is_available("redis.asyncio"):
            return "redis"
        return "memory"

    def cache_adapter(self, config: Config) -> CacheAdapter:
        configured = str(config.get("easysession.cache.provider", "auto"))
        provider = configured if configured != "auto" else self.detect_provider()

        if provider == "redis" and self.is_available("redis.asyncio"):
            import redis.asyncio as aioredis

            from easysession.cache.adapters.redis import RedisCacheAdapter

            url = str(config.get("easysession.cache.redis.url", "redis://localhost:6379/0"))
            client = aioredis.from_url(url)  # type: ignore[no-untyped-call,unused-ignore]
            return RedisCacheAdapter(client=client)

        from easysession.cache.adapters.memory import InMemoryCache

        return InMemoryCache()

    def session_coordinator(
        self,
        config: Config,
        cache: CacheAdapter,
        logging_port: LoggingPort | None = None,
    ) -> SessionCoordinator:
        """Validate the session options and build a coordinator.

        Raises:
            ConfigurationException: if the options are inconsistent.
        """
        options = SessionOptions.from_config(config)
        logger: Any = None
        if logging_port is not None:
            logger = logging_port.get_logger(_LOGGER_NAME)
            logger.info(
                "session_configured",
                cookie_name=options.cookie_name,
                signed=options.key is not None,
                expires_in=options.expires_in,
                cache_ttl_ms=options.cache.expires_in,
                ignored_paths=len(options.ignore_paths),
            )
        return SessionCoordinator(options, cache, logger=logger)

    def session_filter(
        self,
        config: Config,
        cache: CacheAdapter | None = None,
        logging_port: LoggingPort | None = None,
    ) -> SessionFilter:
        """Build the session filter, creating the cache and logging adapters when not given.

        Without a *logging_port* a :class:`StructlogAdapter` is configured from
        the ``easysession.logging`` section of *config*.
        """
        if logging_port is None:
            logging_port = StructlogAdapter()
            logging_port.configure(config)
        if cache is None:
            cache = self.cache_adapter(config)
        return SessionFilter(self.session_coordinator(config, cache, logging_port))

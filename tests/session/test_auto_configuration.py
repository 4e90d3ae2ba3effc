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
"""Tests for SessionAutoConfiguration — wiring options, cache and filter from Config."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from easysession.cache.adapters.memory import InMemoryCache
from easysession.core.config import Config
from easysession.kernel.exceptions import ConfigurationException
from easysession.logging import NoOpLogger
from easysession.session.auto_configuration import SessionAutoConfiguration
from easysession.session.coordinator import SessionCoordinator
from easysession.web.adapters.starlette import SessionFilter


class RecordingLoggingPort:
    def __init__(self) -> None:
        self.names: list[str] = []
        self.events: list[tuple[str, dict[str, Any]]] = []

    def configure(self, config: Config) -> None:
        pass

    def get_logger(self, name: str) -> Any:
        self.names.append(name)
        return self

    def set_level(self, name: str, level: str) -> None:
        pass

    def info(self, event: str, **kwargs: Any) -> None:
        self.events.append((event, kwargs))

    def debug(self, event: str, **kwargs: Any) -> None:
        pass

    def warning(self, event: str, **kwargs: Any) -> None:
        pass


class TestProviderDetection:
    def test_is_available(self):
        assert SessionAutoConfiguration.is_available("json") is True
        assert SessionAutoConfiguration.is_available("no_such_module_xyz") is False

    def test_memory_provider_from_defaults(self):
        cache = SessionAutoConfiguration().cache_adapter(Config.defaults())
        assert isinstance(cache, InMemoryCache)

    def test_auto_falls_back_to_memory(self, monkeypatch):
        monkeypatch.setattr(SessionAutoConfiguration, "is_available", staticmethod(lambda name: False))
        assert SessionAutoConfiguration.detect_provider() == "memory"
        cache = SessionAutoConfiguration().cache_adapter(Config({}))
        assert isinstance(cache, InMemoryCache)

    def test_redis_requested_but_missing_falls_back(self, monkeypatch):
        monkeypatch.setattr(SessionAutoConfiguration, "is_available", staticmethod(lambda name: False))
        config = Config({"easysession": {"cache": {"provider": "redis"}}})
        assert isinstance(SessionAutoConfiguration().cache_adapter(config), InMemoryCache)

    def test_redis_provider(self):
        pytest.importorskip("redis.asyncio")
        from easysession.cache.adapters.redis import RedisCacheAdapter

        config = Config({"easysession": {"cache": {"provider": "redis", "redis": {"url": "redis://localhost:6379/3"}}}})
        assert isinstance(SessionAutoConfiguration().cache_adapter(config), RedisCacheAdapter)


class TestSessionWiring:
    def test_coordinator_from_config(self):
        config = Config({"easysession": {"session": {"key": "test", "expires-in": 1000, "cookie-name": "sid"}}})
        coordinator = SessionAutoConfiguration().session_coordinator(config, InMemoryCache())
        assert isinstance(coordinator, SessionCoordinator)
        assert coordinator.options.cookie_name == "sid"
        assert coordinator.options.cache.expires_in == 1000

    def test_invalid_options_fail_before_serving(self):
        config = Config({"easysession": {"session": {"expires-in": 1000}}})
        with pytest.raises(ConfigurationException):
            SessionAutoConfiguration().session_filter(config, InMemoryCache())

    def test_filter_builds_its_own_cache(self):
        session_filter = SessionAutoConfiguration().session_filter(Config.defaults())
        assert isinstance(session_filter, SessionFilter)
        assert session_filter.coordinator.options.cookie_name == "easySession"

    def test_logs_configuration(self):
        port = RecordingLoggingPort()
        config = Config({"easysession": {"session": {"key": "test", "ignore-paths": ["/health"]}}})
        SessionAutoConfiguration().session_coordinator(config, InMemoryCache(), logging_port=port)
        assert port.names == ["easysession.session"]
        event, fields = port.events[0]
        assert event == "session_configured"
        assert fields["signed"] is True
        assert fields["ignored_paths"] == 1


class TestLoggingWiring:
    def test_filter_configures_structlog_from_config(self):
        config = Config({
            "easysession": {
                "logging": {"format": "json", "level": {"root": "INFO", "easysession.session": "DEBUG"}},
            }
        })
        session_filter = SessionAutoConfiguration().session_filter(config, InMemoryCache())
        assert logging.getLogger("easysession.session").level == logging.DEBUG
        assert not isinstance(session_filter.coordinator._logger, NoOpLogger)

    def test_given_logging_port_is_used_as_is(self):
        port = RecordingLoggingPort()
        SessionAutoConfiguration().session_filter(Config.defaults(), InMemoryCache(), logging_port=port)
        assert port.names == ["easysession.session"]

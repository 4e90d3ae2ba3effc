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
"""StructlogAdapter — the LoggingPort used unless the host supplies its own."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from easysession.core.config import Config

_SECTION = "easysession.logging"


def _renderer(fmt: str) -> structlog.types.Processor:
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _level(name: str) -> int:
    value = logging.getLevelName(name.upper())
    return value if isinstance(value, int) else logging.INFO


class StructlogAdapter:
    """Routes session events through structlog onto stdlib logging.

    ``easysession.logging.format`` picks the renderer (``console`` or
    ``json``), ``easysession.logging.level.root`` the root level, and any
    other key under ``easysession.logging.level`` sets the level of the
    logger it names, e.g. ``easysession.session: DEBUG`` to see every
    cookie decision.
    """

    def __init__(self) -> None:
        self._format = "console"
        self._root_level = "INFO"
        self._module_levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        levels = {str(k): str(v).upper() for k, v in config.get_section(f"{_SECTION}.level").items()}
        self._root_level = levels.pop("root", "INFO")
        self._module_levels = levels
        self._format = str(config.get(f"{_SECTION}.format", "console")).lower()

        structlog.configure(
            processors=[
                structlog.contextvars.merge_contextvars,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
                _renderer(self._format),
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", stream=sys.stdout, level=_level(self._root_level), force=True)
        for name, level in self._module_levels.items():
            self.set_level(name, level)

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        """Set the level of one stdlib logger; unknown level names mean INFO."""
        logging.getLogger(name).setLevel(_level(level))

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
"""LoggingPort — where the session layer gets its loggers from."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from easysession.core.config import Config


@runtime_checkable
class LoggingPort(Protocol):
    """Supplies structlog-style loggers to the session components.

    The loggers handed out must accept ``logger.debug("event", **fields)``
    style calls; the coordinator and verifier only ever emit named events
    with keyword fields and never log identifiers or session values.
    """

    def configure(self, config: Config) -> None:
        """Apply the ``easysession.logging`` section of *config*."""
        ...

    def get_logger(self, name: str) -> Any:
        """Return a logger for the component called *name*."""
        ...

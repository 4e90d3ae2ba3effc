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
"""WebFilter — the seam between the session layer and an HTTP framework."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, runtime_checkable

# Passes the request on to the next filter, or to the route handler.
CallNext = Callable[[Any], Awaitable[Any]]


@runtime_checkable
class WebFilter(Protocol):
    """Wraps the handling of one request.

    Request and response stay framework types (``Any`` here) so that only
    adapters import Starlette. A filter that needs to touch the response
    after the handler, as the session filter does with ``Set-Cookie``,
    awaits ``call_next`` and edits what it returns.
    """

    def should_not_filter(self, request: Any) -> bool: ...

    async def do_filter(self, request: Any, call_next: CallNext) -> Any: ...

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
"""WebFilterChainMiddleware — runs WebFilters around a Starlette app."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from easysession.web.ports.filter import CallNext, WebFilter


class _BufferedSend:
    """ASGI ``send`` callable that collects the downstream response."""

    def __init__(self) -> None:
        self.status = 200
        self.headers: list[tuple[bytes, bytes]] = []
        self.body = bytearray()

    async def __call__(self, message: Message) -> None:
        if message["type"] == "http.response.start":
            self.status = message["status"]
            self.headers = list(message.get("headers", []))
        elif message["type"] == "http.response.body":
            self.body += message.get("body", b"")

    def to_response(self) -> Response:
        response = Response(content=bytes(self.body), status_code=self.status)
        response.raw_headers[:] = self.headers
        return response


class WebFilterChainMiddleware:
    """Pure ASGI middleware applying ``filters`` in order, first one outermost.

    The downstream response is buffered into a :class:`Response` so that
    filters can still set cookies once the handler has finished. Exceptions
    from the handler are not caught here.
    """

    def __init__(self, app: ASGIApp, filters: Sequence[WebFilter] = ()) -> None:
        self.app = app
        self.filters = tuple(filters)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def handler(request: Any) -> Response:
            buffered = _BufferedSend()
            await self.app(scope, receive, buffered)
            return buffered.to_response()

        call: CallNext = handler
        for web_filter in reversed(self.filters):
            call = _link(web_filter, call)

        response = await call(Request(scope, receive, send))
        await response(scope, receive, send)


def _link(web_filter: WebFilter, call_next: CallNext) -> CallNext:
    async def call(request: Any) -> Any:
        if web_filter.should_not_filter(request):
            return await call_next(request)
        return await web_filter.do_filter(request, call_next)

    return call

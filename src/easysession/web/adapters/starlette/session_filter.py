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
"""SessionFilter — carries the session identifier cookie for Starlette apps."""

from __future__ import annotations

from typing import Any

from easysession.kernel.exceptions import EasySessionException
from easysession.session.context import SessionContext
from easysession.session.coordinator import SessionCoordinator
from easysession.web.errors import error_response
from easysession.web.ports.filter import CallNext


class SessionFilter:
    """Runs the session hooks around the rest of the filter chain.

    Reads the identifier cookie, attaches the session to
    ``request.state.session`` (and the full context to
    ``request.state.session_context``), and after the handler returns
    persists the session and sets or clears the cookie on the response.
    Exempt paths get no ``request.state.session`` at all.

    Session hook failures replace the response with a JSON error response
    (503 for cache failures, 500 for identifier generation failures) that
    never carries a new identifier. Exceptions raised by the handler
    propagate without the session being persisted.
    """

    def __init__(self, coordinator: SessionCoordinator) -> None:
        self._coordinator = coordinator

    @property
    def coordinator(self) -> SessionCoordinator:
        return self._coordinator

    def should_not_filter(self, request: Any) -> bool:
        # Exempt paths are resolved by the coordinator so they are still marked on the context.
        return False

    async def do_filter(self, request: Any, call_next: CallNext) -> Any:
        cookie_name = self._coordinator.options.cookie_name
        ctx = SessionContext(path=request.url.path, cookie=request.cookies.get(cookie_name))
        request.state.session_context = ctx

        try:
            await self._coordinator.on_request_start(ctx)
        except EasySessionException as exc:
            return error_response(request, exc)

        if ctx.session is not None:
            request.state.session = ctx.session

        # Unlike a pre-response hook, nothing below runs when the handler raises:
        # the session is not persisted and no cookie is issued.
        response = await call_next(request)

        try:
            await self._coordinator.on_request_end(ctx)
        except EasySessionException as exc:
            error = error_response(request, exc)
            if ctx.clear_cookie:
                self._delete_cookie(error)
            return error

        # A rejected cookie is always replaced by a freshly issued one here.
        if ctx.cookie_to_set is not None:
            self._set_cookie(response, ctx.cookie_to_set)
        return response

    def _set_cookie(self, response: Any, session_id: str) -> None:
        opts = self._coordinator.options
        cookie = opts.cookie
        response.set_cookie(
            key=opts.cookie_name,
            value=session_id,
            max_age=cookie.max_age,
            path=cookie.path or "/",
            domain=cookie.domain,
            secure=cookie.secure,
            httponly=cookie.http_only,
            samesite=cookie.same_site,
        )

    def _delete_cookie(self, response: Any) -> None:
        opts = self._coordinator.options
        response.delete_cookie(
            key=opts.cookie_name,
            path=opts.cookie.path or "/",
            domain=opts.cookie.domain,
            secure=opts.cookie.secure,
            httponly=opts.cookie.http_only,
        )

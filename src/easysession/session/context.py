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
"""SessionContext — per-request session state shared by the two hooks."""

from __future__ import annotations

from dataclasses import dataclass

from easysession.session.session import Session


@dataclass
class SessionContext:
    """State of one request-response cycle.

    The host fills in ``path`` and ``cookie`` (the raw incoming cookie
    value, if any). The coordinator fills in the rest; the host applies
    ``cookie_to_set`` / ``clear_cookie`` to the outgoing response.
    """

    path: str
    cookie: str | None = None
    ignored: bool = False
    session_id: str | None = None
    session: Session | None = None
    cookie_to_set: str | None = None
    clear_cookie: bool = False

    def issue_cookie(self, session_id: str) -> None:
        """Send *session_id* as the new cookie.

        A cookie to set takes precedence over ``clear_cookie`` on a
        successful response; ``clear_cookie`` still applies to an error
        response.
        """
        self.session_id = session_id
        self.cookie_to_set = session_id

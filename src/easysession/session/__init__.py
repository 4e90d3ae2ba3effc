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
"""EasySession — signed session identifiers over a server-side cache.

Import the Starlette integration from the adapter package::

    from easysession.web.adapters.starlette import SessionFilter, WebFilterChainMiddleware
"""

from easysession.session.codec import SessionIdCodec
from easysession.session.context import SessionContext
from easysession.session.coordinator import SessionCoordinator
from easysession.session.options import CacheOptions, CookieOptions, SessionOptions
from easysession.session.paths import LiteralPath, PathMatcher, PatternPath
from easysession.session.session import Session
from easysession.session.verifier import SessionIdVerifier

__all__ = [
    "CacheOptions",
    "CookieOptions",
    "LiteralPath",
    "PathMatcher",
    "PatternPath",
    "Session",
    "SessionContext",
    "SessionCoordinator",
    "SessionIdCodec",
    "SessionIdVerifier",
    "SessionOptions",
]

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
"""Session exceptions as RFC 7807 inspired JSON error responses."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from starlette.responses import JSONResponse

from easysession.kernel.exceptions import (
    CacheUnavailableException,
    EasySessionException,
    IdentifierGenerationException,
)

# Failures the session hooks raise; anything else is a 500.
_STATUS_MAP: dict[type, int] = {
    CacheUnavailableException: 503,
    IdentifierGenerationException: 500,
}


def get_status_code(exc: Exception) -> int:
    """Map exception type to HTTP status code."""
    for exc_type, status in _STATUS_MAP.items():
        if isinstance(exc, exc_type):
            return status
    return 500


def error_response(request: Any, exc: Exception) -> JSONResponse:
    """Build the JSON error response for an exception raised by a session hook."""
    status = get_status_code(exc)
    code = "INTERNAL_ERROR"
    message = "Internal server error"
    if isinstance(exc, EasySessionException):
        code = exc.code or type(exc).__name__
        message = str(exc)

    body: dict[str, Any] = {
        "error": {
            "message": message,
            "code": code,
            "timestamp": datetime.now(UTC).isoformat(),
            "status": status,
            "path": request.url.path,
        }
    }
    return JSONResponse(body, status_code=status)

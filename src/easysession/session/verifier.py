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
"""Session identifier verification."""

from __future__ import annotations

import hmac
import math
from typing import Any

from easysession.kernel.exceptions import DecodeException
from easysession.logging.noop import NoOpLogger
from easysession.session.codec import EXPIRY_FORMAT, SessionIdCodec


class SessionIdVerifier:
    """Checks length, expiry and authenticity of an incoming identifier.

    The identifier is rebuilt from the random bytes and expiry it carries
    and compared with the input in constant time. Without a configured key
    this only checks the length and expiry.
    """

    def __init__(self, codec: SessionIdCodec, logger: Any | None = None) -> None:
        self._codec = codec
        self._logger = logger or NoOpLogger()

    def is_valid(self, session_id: str) -> bool:
        """Return ``True`` if *session_id* was built with these options and has not expired.

        Malformed input is reported as invalid, never raised. An
        :class:`~easysession.kernel.exceptions.IdentifierGenerationException`
        from rebuilding the identifier does propagate.
        """
        opts = self._codec.options
        try:
            raw = self._codec.decode(session_id)
        except DecodeException:
            self._logger.debug("session_id_malformed")
            return False

        if len(raw) < opts.min_size:
            self._logger.debug("session_id_too_short", length=len(raw), min_size=opts.min_size)
            return False

        random_bytes = raw[: opts.size]
        expires_at: float | None = None
        if opts.expires_in is not None:
            (expires_at,) = EXPIRY_FORMAT.unpack_from(raw, opts.size)
            if not math.isfinite(expires_at) or self._codec.now() >= expires_at:
                self._logger.debug("session_id_expired", expires_at=expires_at)
                return False

        expected = self._codec.build(random_bytes, expires_at)
        valid = hmac.compare_digest(session_id.encode("utf-8"), expected.encode("ascii"))
        self._logger.debug("session_id_verified", valid=valid)
        return valid

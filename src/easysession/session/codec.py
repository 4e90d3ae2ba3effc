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
"""Session identifier codec.

Wire format, before encoding::

    random bytes (size) | expiry (8-byte big-endian double, epoch ms) | HMAC digest

The expiry segment is present only when ``expires_in`` is configured and
the HMAC only when ``key`` is. The HMAC covers every preceding segment in
order. The bytes are base64-encoded (standard alphabet, padded) and then
percent-encoded with the same unreserved set as JavaScript's
``encodeURIComponent`` so the value is safe in cookies and URLs.
"""

from __future__ import annotations

import base64
import hmac
import secrets
import struct
import time
from collections.abc import Callable
from urllib.parse import quote, unquote

from easysession.kernel.exceptions import DecodeException, IdentifierGenerationException
from easysession.session.options import SessionOptions

EXPIRY_FORMAT = struct.Struct(">d")

_UNRESERVED = "-_.!~*'()"


def now_ms() -> float:
    """Current time as epoch milliseconds."""
    return time.time() * 1000


def encode(raw: bytes) -> str:
    return quote(base64.b64encode(raw).decode("ascii"), safe=_UNRESERVED)


def decode(session_id: str) -> bytes:
    """Reverse :func:`encode`.

    Raises:
        DecodeException: if *session_id* is not percent-encoded base64.
    """
    try:
        return base64.b64decode(unquote(session_id, errors="strict"), validate=True)
    except ValueError as exc:
        raise DecodeException(
            "Session identifier is not valid base64",
            code="SESSION_ID_MALFORMED",
        ) from exc


class SessionIdCodec:
    """Builds session identifiers for one set of :class:`SessionOptions`.

    ``build`` is deterministic for identical ``random_bytes`` and
    ``expires_at``; entropy is only drawn when ``random_bytes`` is omitted.
    """

    def __init__(self, options: SessionOptions, clock: Callable[[], float] = now_ms) -> None:
        self._options = options
        self._clock = clock

    @property
    def options(self) -> SessionOptions:
        return self._options

    def now(self) -> float:
        return self._clock()

    def build(self, random_bytes: bytes | None = None, expires_at: float | None = None) -> str:
        """Build an encoded session identifier.

        Args:
            random_bytes: Entropy segment. ``size`` fresh bytes when omitted.
            expires_at: Absolute expiry in epoch ms. ``now + expires_in`` when
                omitted. Ignored unless ``expires_in`` is configured.

        Raises:
            IdentifierGenerationException: if the digest algorithm is unknown.
        """
        opts = self._options
        segments = [random_bytes if random_bytes is not None else secrets.token_bytes(opts.size)]

        if opts.expires_in is not None:
            if expires_at is None:
                expires_at = self._clock() + opts.expires_in
            segments.append(EXPIRY_FORMAT.pack(expires_at))

        key = opts.key_bytes
        if key is not None:
            try:
                mac = hmac.new(key, digestmod=opts.algorithm)
            except ValueError as exc:
                raise IdentifierGenerationException(
                    f"Cannot create session identifier: unsupported digest algorithm '{opts.algorithm}'",
                    code="SESSION_ID_GENERATION_FAILED",
                    context={"algorithm": opts.algorithm},
                ) from exc
            for segment in segments:
                mac.update(segment)
            segments.append(mac.digest())

        return encode(b"".join(segments))

    def decode(self, session_id: str) -> bytes:
        return decode(session_id)

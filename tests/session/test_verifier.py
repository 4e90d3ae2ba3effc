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
"""Tests for SessionIdVerifier — length, expiry and MAC checks."""

from __future__ import annotations

import base64
import os
import struct

import pytest

from easysession.kernel.exceptions import IdentifierGenerationException
from easysession.session.codec import SessionIdCodec, decode, encode
from easysession.session.options import SessionOptions
from easysession.session.verifier import SessionIdVerifier

NOW = 1_700_000_000_000.0


class _Clock:
    def __init__(self, now: float = NOW) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def _verifier(clock: _Clock | None = None, **kwargs) -> tuple[SessionIdCodec, SessionIdVerifier]:
    codec = SessionIdCodec(SessionOptions(**kwargs), clock=clock or _Clock())
    return codec, SessionIdVerifier(codec)


def _flip(session_id: str, index: int) -> str:
    raw = bytearray(decode(session_id))
    raw[index] ^= 0x01
    return encode(bytes(raw))


class TestRoundTrip:
    @pytest.mark.parametrize(
        "options",
        [
            {},
            {"key": "test"},
            {"key": "test", "expires_in": 1000},
            {"key": "test", "expires_in": 1000, "size": 32, "algorithm": "sha1"},
            {"size": 1},
        ],
    )
    def test_built_identifier_is_valid(self, options):
        codec, verifier = _verifier(**options)
        assert verifier.is_valid(codec.build()) is True

    def test_explicit_random_bytes_and_expiry(self):
        codec, verifier = _verifier(key="test", expires_in=1000)
        assert verifier.is_valid(codec.build(os.urandom(16), NOW + 10_000)) is True


class TestTamperSensitivity:
    def test_flipping_any_byte_invalidates(self):
        codec, verifier = _verifier(key="test", expires_in=1000)
        session_id = codec.build()
        for index in range(len(decode(session_id))):
            assert verifier.is_valid(_flip(session_id, index)) is False, index

    def test_flipping_any_byte_invalidates_without_expiry(self):
        codec, verifier = _verifier(key="test")
        session_id = codec.build()
        for index in range(len(decode(session_id))):
            assert verifier.is_valid(_flip(session_id, index)) is False, index

    def test_identifier_from_other_key_is_invalid(self):
        other, _ = _verifier(key="other")
        _, verifier = _verifier(key="test")
        assert verifier.is_valid(other.build()) is False

    def test_truncated_mac_is_invalid(self):
        codec, verifier = _verifier(key="test")
        raw = decode(codec.build())
        assert verifier.is_valid(encode(raw[:-1])) is False

    def test_extra_trailing_bytes_are_invalid(self):
        codec, verifier = _verifier(key="test")
        assert verifier.is_valid(encode(decode(codec.build()) + b"\x00")) is False

    def test_without_key_any_random_bytes_are_accepted(self):
        codec, verifier = _verifier()
        assert verifier.is_valid(_flip(codec.build(), 0)) is True


class TestExpiry:
    def test_expired_one_millisecond_ago_is_invalid(self):
        codec, verifier = _verifier(key="test", expires_in=1000)
        assert verifier.is_valid(codec.build(expires_at=NOW - 1)) is False

    def test_expiring_now_is_invalid(self):
        codec, verifier = _verifier(key="test", expires_in=1000)
        assert verifier.is_valid(codec.build(expires_at=NOW)) is False

    def test_far_future_expiry_is_valid(self):
        codec, verifier = _verifier(key="test", expires_in=1000)
        assert verifier.is_valid(codec.build(expires_at=NOW + 10**9)) is True

    def test_becomes_invalid_once_clock_passes_expiry(self):
        clock = _Clock()
        codec, verifier = _verifier(clock, key="test", expires_in=1000)
        session_id = codec.build()
        clock.now = NOW + 999
        assert verifier.is_valid(session_id) is True
        clock.now = NOW + 1000
        assert verifier.is_valid(session_id) is False

    def test_nan_expiry_is_invalid(self):
        codec, verifier = _verifier(key="test", expires_in=1000)
        raw = os.urandom(16) + struct.pack(">d", float("nan")) + b"\x00" * 32
        assert verifier.is_valid(encode(raw)) is False


class TestMinimumLength:
    def test_short_payload_without_expiry(self):
        _, verifier = _verifier()
        assert verifier.is_valid("abcd") is False

    def test_payload_of_size_bytes_is_too_short_with_expiry(self):
        _, verifier = _verifier(key="test", expires_in=1000)
        assert verifier.is_valid(encode(os.urandom(16))) is False

    @pytest.mark.parametrize("length", [0, 1, 15, 23])
    def test_any_short_payload_is_invalid(self, length):
        _, verifier = _verifier(key="test", expires_in=1000)
        assert verifier.is_valid(encode(b"\xff" * length)) is False


class TestMalformedInput:
    @pytest.mark.parametrize("value", ["", "%", "%zz", "not base64!", "ü", "KRf_gZUqEMW66rRSIbZdIEJ07X"])
    def test_malformed_identifier_is_invalid(self, value):
        _, verifier = _verifier(key="test", expires_in=1000)
        assert verifier.is_valid(value) is False

    def test_unencoded_base64_is_invalid(self):
        codec, verifier = _verifier(key="test")
        raw = decode(codec.build(b"\xfb" * 16))
        plain = base64.b64encode(raw).decode()
        assert plain.startswith("+/v7")
        assert verifier.is_valid(plain) is False


class TestGenerationErrors:
    def test_unknown_algorithm_propagates(self):
        codec = SessionIdCodec(SessionOptions(key="test"), clock=_Clock())
        verifier = SessionIdVerifier(SessionIdCodec(SessionOptions(key="test", algorithm="invalid")))
        with pytest.raises(IdentifierGenerationException):
            verifier.is_valid(codec.build())

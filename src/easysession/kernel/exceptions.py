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
"""EasySession exception hierarchy.

Verification failures (malformed, expired or forged identifiers) never
escape the session layer. Only the exceptions below reach callers:

* :class:`ConfigurationException` at construction time.
* :class:`IdentifierGenerationException` when a new identifier cannot be built.
* :class:`CacheUnavailableException` when the session cache fails.
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class EasySessionException(Exception):
    """Base exception for all EasySession errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "SESSION_CACHE_UNAVAILABLE").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationException(EasySessionException):
    """Invalid session options. Raised once, before any request is served."""


# =============================================================================
# Identifier Exceptions
# =============================================================================


class DecodeException(EasySessionException):
    """An incoming session identifier is not valid percent-encoded base64."""


class IdentifierGenerationException(EasySessionException):
    """A session identifier could not be built (e.g. unknown digest algorithm)."""


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(EasySessionException):
    """Infrastructure failures: cache, network."""


class CacheUnavailableException(InfrastructureException):
    """The session cache could not be read or written."""

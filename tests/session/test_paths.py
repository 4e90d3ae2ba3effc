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
"""Tests for PathMatcher and the ignore-path variants."""

from __future__ import annotations

import re

import pytest

from easysession.session.paths import LiteralPath, PathMatcher, PatternPath, as_ignore_path, matches


class TestIgnorePathCoercion:
    def test_string_becomes_literal(self):
        assert as_ignore_path("/foo") == LiteralPath("/foo")

    def test_compiled_regex_becomes_pattern(self):
        pattern = re.compile(r"^/static/")
        assert as_ignore_path(pattern) == PatternPath(pattern)

    def test_variants_pass_through(self):
        entry = PatternPath.compile(r"\.css$")
        assert as_ignore_path(entry) is entry

    def test_unsupported_entry_raises(self):
        with pytest.raises(TypeError):
            as_ignore_path(42)  # type: ignore[arg-type]


class TestMatches:
    def test_literal_requires_exact_match(self):
        assert matches(LiteralPath("/foo"), "/foo") is True
        assert matches(LiteralPath("/foo"), "/foo/bar") is False
        assert matches(LiteralPath("/foo"), "/fo") is False

    def test_pattern_searches_anywhere(self):
        entry = PatternPath.compile(r"/foo")
        assert matches(entry, "/foo") is True
        assert matches(entry, "/api/foo/bar") is True
        assert matches(entry, "/bar") is False

    def test_anchored_pattern(self):
        entry = PatternPath.compile(r"^/health$")
        assert matches(entry, "/health") is True
        assert matches(entry, "/healthz") is False


class TestPathMatcher:
    def test_empty_matcher_ignores_nothing(self):
        assert PathMatcher().should_ignore("/") is False

    def test_literal_paths(self):
        matcher = PathMatcher(["/foo"])
        assert matcher.should_ignore("/foo") is True
        assert matcher.should_ignore("/") is False

    def test_regex_paths(self):
        matcher = PathMatcher([re.compile(r"/foo")])
        assert matcher.should_ignore("/foo") is True
        assert matcher.should_ignore("/x/foo") is True

    def test_mixed_paths(self):
        matcher = PathMatcher([re.compile(r"/bar"), "/foo"])
        assert matcher.should_ignore("/foo") is True
        assert matcher.should_ignore("/bar/baz") is True
        assert matcher.should_ignore("/baz") is False

    def test_order_does_not_change_outcome(self):
        entries = [re.compile(r"^/a"), "/b", PatternPath.compile(r"c$")]
        forward = PathMatcher(entries)
        backward = PathMatcher(reversed(entries))
        for path in ["/a1", "/b", "/xc", "/d", "/"]:
            assert forward.should_ignore(path) == backward.should_ignore(path)

    def test_entries_are_normalized(self):
        matcher = PathMatcher(["/foo", re.compile("x")])
        assert matcher.entries == (LiteralPath("/foo"), PatternPath(re.compile("x")))

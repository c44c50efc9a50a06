"""Tests for segpath.compiler — template parsing and compilation."""

import logging

import pytest

from segpath.compiler import compile, parse_template
from segpath.config import Syntax
from segpath.pattern import Pattern
from segpath.segment import Param, Static


class TestParseTemplate:
    @pytest.mark.parametrize(
        ("template", "segments", "trailing"),
        [
            ("foo", (Static("foo"),), False),
            ("/foo", (Static(""), Static("foo")), False),
            (":foo", (Param("foo"),), False),
            ("/:foo", (Static(""), Param("foo")), False),
            ("foo/:bar", (Static("foo"), Param("bar")), False),
            (
                "foo/:foo/bar/:bar",
                (Static("foo"), Param("foo"), Static("bar"), Param("bar")),
                False,
            ),
            ("foo/:bar/:baz/*", (Static("foo"), Param("bar"), Param("baz")), True),
            ("/:/*", (Static(""), Param("")), True),
        ],
    )
    def test_segments(self, template: str, segments: tuple, trailing: bool) -> None:
        assert parse_template(template) == (segments, trailing)

    def test_bare_wildcard(self) -> None:
        assert parse_template("*") == ((), True)

    def test_empty_template(self) -> None:
        assert parse_template("") == ((Static(""),), False)

    def test_consecutive_separators_are_empty_statics(self) -> None:
        segments, _ = parse_template("a//b/")
        assert segments == (Static("a"), Static(""), Static("b"), Static(""))

    def test_mid_segment_colon_is_literal(self) -> None:
        segments, _ = parse_template("/files/a:b")
        assert segments[-1] == Static("a:b")

    def test_star_not_last_is_literal(self) -> None:
        segments, trailing = parse_template("/*/files")
        assert segments == (Static(""), Static("*"), Static("files"))
        assert trailing is False

    def test_star_inside_segment_is_literal(self) -> None:
        segments, trailing = parse_template("/files/a*")
        assert segments[-1] == Static("a*")
        assert trailing is False

    def test_only_one_wildcard_is_consumed(self) -> None:
        segments, trailing = parse_template("*/*")
        assert segments == (Static("*"),)
        assert trailing is True

    def test_param_prefix_stripped_once(self) -> None:
        segments, _ = parse_template("::id")
        assert segments == (Param(":id"),)

    def test_custom_syntax(self) -> None:
        syntax = Syntax(separator=".", param_prefix="$", wildcard="#")
        segments, trailing = parse_template("events.$kind.#", syntax)
        assert segments == (Static("events"), Param("kind"))
        assert trailing is True


class TestCompile:
    def test_returns_pattern(self) -> None:
        pattern = compile("/users/:id")
        assert isinstance(pattern, Pattern)
        assert pattern.template == "/users/:id"
        assert pattern.segments == (Static(""), Static("users"), Param("id"))
        assert pattern.trailing is False

    def test_deterministic(self) -> None:
        assert compile("/a/:b/*") == compile("/a/:b/*")

    def test_different_templates_differ(self) -> None:
        assert compile("/a/:b") != compile("/a/:c")

    def test_keeps_syntax(self) -> None:
        syntax = Syntax(separator=".")
        assert compile("a.b", syntax).syntax is syntax

    def test_logs_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="segpath.compiler"):
            compile("/users/:id/*")
        assert "'/users/:id/*'" in caplog.text
        assert "trailing=True" in caplog.text

"""Tests for UrlPattern."""

import pytest

from urlpat import DuplicateParameterError, Url, UrlPattern, as_pattern


class TestCaptures:
    def test_captures_in_pattern_order(self) -> None:
        p = UrlPattern.parse("/a/:x/:y?:opt&lit=1&:req=")
        assert p.captures == (":x", ":y", ":opt", ":req")

    def test_required_and_optional(self) -> None:
        p = UrlPattern.parse("/a/:x?:opt&:req=&:def=v")
        assert p.required_captures == (":x", ":req", ":def")
        assert p.optional_captures == (":opt",)

    def test_no_captures(self) -> None:
        p = UrlPattern.parse("https://h/a?b=c")
        assert p.captures == ()


class TestMatchAndInflate:
    def test_match(self) -> None:
        p = UrlPattern.parse("https://example.com/users/:id?:tab")
        assert p.match("https://example.com/users/42?tab=posts") == {
            ":id": "42",
            ":tab": "posts",
        }

    def test_matches(self) -> None:
        p = UrlPattern.parse("/users/:id")
        assert p.matches("/users/1") is True
        assert p.matches("/users") is False
        assert p.matches("/groups/1") is False

    def test_matches_propagates_duplicate(self) -> None:
        p = UrlPattern.parse("/:a/:a")
        with pytest.raises(DuplicateParameterError):
            p.matches("/x/y")

    def test_inflate(self) -> None:
        p = UrlPattern.parse("https://example.com/users/:id?:tab")
        assert str(p.inflate({":id": "7"})) == "https://example.com/users/7?"

    def test_str(self) -> None:
        assert str(UrlPattern.parse("/a/:b?:c=")) == "/a/:b?:c="


class TestAsPattern:
    def test_passthrough(self) -> None:
        p = UrlPattern.parse("/a")
        assert as_pattern(p) is p

    def test_from_text_and_url(self) -> None:
        assert as_pattern("/a") == UrlPattern(Url.parse("/a"))
        assert as_pattern(Url.parse("/a")) == UrlPattern.parse("/a")

"""Tests for PatternTable resolution, reversal and validation."""

from __future__ import annotations

import pytest

from urlpat import (
    MAX_ROUTES,
    DuplicateParameterError,
    DuplicateRouteError,
    MissingParameterError,
    PatternTable,
    Route,
    RouteMatch,
    TooManyRoutesError,
    UnknownRouteError,
    UrlPattern,
)


def route(name: str, pattern: str) -> Route:
    return Route(name, UrlPattern.parse(pattern))


class TestResolve:
    def test_first_match_wins(self, table: PatternTable) -> None:
        assert table.resolve("/users/me") == RouteMatch("me", {})

    def test_later_route(self, table: PatternTable) -> None:
        assert table.resolve("/users/42") == RouteMatch("user", {":id": "42"})

    def test_query_captures(self, table: PatternTable) -> None:
        assert table.resolve("/search?q=cats&page=2") == RouteMatch(
            "search", {":q": "cats", ":page": "2"}
        )

    def test_missing_required_query_falls_through(self, table: PatternTable) -> None:
        assert table.resolve("/search") is None

    def test_no_match(self, table: PatternTable) -> None:
        assert table.resolve("/nowhere") is None

    def test_empty_table(self) -> None:
        assert PatternTable(routes=()).resolve("/") is None

    def test_broken_pattern_propagates(self) -> None:
        table = PatternTable(
            routes=(route("broken", "/:a/:a"), route("fallback", "/:x/:y")),
        )
        with pytest.raises(DuplicateParameterError):
            table.resolve("/1/2")


class TestReverse:
    def test_reverse(self, table: PatternTable) -> None:
        assert str(table.reverse("user", {":id": "7"})) == "/users/7"

    def test_reverse_optional_dropped(self, table: PatternTable) -> None:
        assert str(table.reverse("search", {":q": "dogs"})) == "/search?q=dogs"

    def test_reverse_missing_parameter(self, table: PatternTable) -> None:
        with pytest.raises(MissingParameterError):
            table.reverse("user", {})

    def test_unknown_route(self, table: PatternTable) -> None:
        with pytest.raises(UnknownRouteError) as excinfo:
            table.reverse("nope", {})
        assert excinfo.value.name == "nope"
        assert excinfo.value.available == ["me", "search", "user"]

    def test_unknown_route_empty_table(self) -> None:
        with pytest.raises(UnknownRouteError, match="table is empty"):
            PatternTable(routes=()).get("x")


class TestValidation:
    def test_duplicate_name(self) -> None:
        with pytest.raises(DuplicateRouteError) as excinfo:
            PatternTable(routes=(route("a", "/x"), route("a", "/y")))
        assert excinfo.value.name == "a"

    def test_too_many_routes(self) -> None:
        routes = tuple(route(f"r{i}", f"/{i}") for i in range(MAX_ROUTES + 1))
        with pytest.raises(TooManyRoutesError) as excinfo:
            PatternTable(routes=routes)
        assert excinfo.value.count == MAX_ROUTES + 1

    def test_at_limit(self) -> None:
        routes = tuple(route(f"r{i}", f"/{i}") for i in range(MAX_ROUTES))
        assert len(PatternTable(routes=routes).names) == MAX_ROUTES

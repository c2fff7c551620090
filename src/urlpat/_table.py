"""PatternTable — named URL patterns with first-match-wins resolution.

resolve() walks the routes in order and returns the first that matches,
together with its captures. reverse() is the inverse: inflate a route by
name. Validation (unique names, route count) runs at construction time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from urlpat._errors import DuplicateParameterError, MatchError, UrlPatternError
from urlpat._url import as_url

if TYPE_CHECKING:
    from collections.abc import Mapping

    from urlpat._pattern import UrlPattern
    from urlpat._types import ParameterMap
    from urlpat._url import Url

logger = logging.getLogger(__name__)

MAX_ROUTES = 256


class TableError(UrlPatternError):
    """Errors from pattern table validation and lookup."""


class DuplicateRouteError(TableError):
    """Two routes share a name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"duplicate route name: {name!r}")


class UnknownRouteError(TableError):
    """reverse() was asked for a name the table does not hold."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = sorted(available)
        if self.available:
            msg = f"unknown route: {name!r} (registered: {', '.join(self.available)})"
        else:
            msg = f"unknown route: {name!r} (table is empty)"
        super().__init__(msg)


class TooManyRoutesError(TableError):
    """Table has more routes than MAX_ROUTES."""

    def __init__(self, count: int, max_: int) -> None:
        self.count = count
        self.max = max_
        super().__init__(f"too many routes: {count} exceeds maximum {max_}")


@dataclass(frozen=True, slots=True)
class Route:
    """A pattern with the name it is resolved to and reversed from."""

    name: str
    pattern: UrlPattern


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful resolve()."""

    name: str
    params: ParameterMap


@dataclass(frozen=True, slots=True)
class PatternTable:
    """Ordered routes; the first matching route wins.

    A route whose pattern repeats a capture token raises
    DuplicateParameterError during resolve() instead of being skipped,
    so a broken pattern cannot silently fall through to a later route.
    """

    routes: tuple[Route, ...]

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raises TooManyRoutesError or DuplicateRouteError."""
        if len(self.routes) > MAX_ROUTES:
            raise TooManyRoutesError(len(self.routes), MAX_ROUTES)
        seen: set[str] = set()
        for route in self.routes:
            if route.name in seen:
                raise DuplicateRouteError(route.name)
            seen.add(route.name)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(r.name for r in self.routes)

    def resolve(self, candidate: Url | str) -> RouteMatch | None:
        """Return the first route matching ``candidate``, or None."""
        url = as_url(candidate)
        for route in self.routes:
            try:
                params = route.pattern.match(url)
            except DuplicateParameterError:
                raise
            except MatchError as e:
                logger.debug("route %s skipped: %s", route.name, e)
                continue
            logger.debug("route %s matched %s", route.name, params)
            return RouteMatch(route.name, params)
        return None

    def get(self, name: str) -> Route:
        for route in self.routes:
            if route.name == name:
                return route
        raise UnknownRouteError(name, list(self.names))

    def reverse(self, name: str, params: Mapping[str, str]) -> Url:
        """Inflate the route called ``name``."""
        return self.get(name).pattern.inflate(params)

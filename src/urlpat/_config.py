"""Config types for building a PatternTable from plain data.

The same shape works from JSON or YAML:

    routes:
      - name: user
        pattern: "https://example.com/users/:id?:tab"
      - name: search
        pattern: "/search?:q=&:page"

Construction path:
  dict → parse_table_config() → TableConfig → load_table() → PatternTable
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from urlpat._pattern import UrlPattern
from urlpat._table import PatternTable, Route


@dataclass(frozen=True, slots=True)
class RouteConfig:
    """A named pattern, still in text form."""

    name: str
    pattern: str


@dataclass(frozen=True, slots=True)
class TableConfig:
    routes: tuple[RouteConfig, ...]


class ConfigParseError(Exception):
    """Error parsing a config dict into config types."""


def parse_table_config(data: dict[str, Any]) -> TableConfig:
    """Parse a dict into a TableConfig.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    raw_routes = data.get("routes")
    if raw_routes is None:
        msg = "missing required field 'routes'"
        raise ConfigParseError(msg)
    if not isinstance(raw_routes, list):
        msg = f"'routes' must be a list, got {type(raw_routes).__name__}"
        raise ConfigParseError(msg)

    return TableConfig(routes=tuple(_parse_route(r) for r in raw_routes))


def _parse_route(data: dict[str, Any]) -> RouteConfig:
    if not isinstance(data, dict):
        msg = f"route must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    for key in ("name", "pattern"):
        if key not in data:
            msg = f"route missing required field {key!r}"
            raise ConfigParseError(msg)
        if not isinstance(data[key], str):
            msg = f"route {key} must be a string, got {type(data[key]).__name__}"
            raise ConfigParseError(msg)

    return RouteConfig(name=data["name"], pattern=data["pattern"])


def load_table(config: TableConfig) -> PatternTable:
    """Compile every route pattern and build the table.

    Raises:
        InvalidUrlError: If a pattern cannot be parsed.
        TableError: If the table fails validation.
    """
    return PatternTable(
        routes=tuple(Route(r.name, UrlPattern.parse(r.pattern)) for r in config.routes)
    )

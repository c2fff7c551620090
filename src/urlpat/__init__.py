"""urlpat — match URLs against capture patterns, and fill patterns back in.

All public types are exported from this module for flat imports:

    from urlpat import match, inflate, UrlPattern, PatternTable
"""

__version__ = "0.1.0"

# Config types — see urlpat._config for details
from urlpat._config import (
    ConfigParseError,
    RouteConfig,
    TableConfig,
    load_table,
    parse_table_config,
)

# Errors
from urlpat._errors import (
    ComponentMismatchError,
    DuplicateParameterError,
    InflateError,
    InvalidUrlError,
    MatchError,
    MissingParameterError,
    MissingQueryItemsError,
    PathLengthMismatchError,
    PathMismatchError,
    UrlPatternError,
    UrlTooLongError,
)

# Core operations
from urlpat._inflate import inflate, inflate_path, inflate_query
from urlpat._match import COMPONENT_FIELDS, match, match_components, match_path, match_query
from urlpat._pattern import UrlPattern, as_pattern

# Pattern table
from urlpat._table import (
    MAX_ROUTES,
    DuplicateRouteError,
    PatternTable,
    Route,
    RouteMatch,
    TableError,
    TooManyRoutesError,
    UnknownRouteError,
)
from urlpat._types import CAPTURE_PREFIX, ParameterMap, QueryItem, is_capture_token
from urlpat._url import MAX_URL_LENGTH, Url, as_url

__all__ = [
    # Data model
    "Url",
    "QueryItem",
    "ParameterMap",
    "CAPTURE_PREFIX",
    "MAX_URL_LENGTH",
    "as_url",
    "is_capture_token",
    # Operations
    "match",
    "match_components",
    "match_path",
    "match_query",
    "COMPONENT_FIELDS",
    "inflate",
    "inflate_path",
    "inflate_query",
    # Compiled pattern
    "UrlPattern",
    "as_pattern",
    # Errors
    "UrlPatternError",
    "MatchError",
    "ComponentMismatchError",
    "PathMismatchError",
    "PathLengthMismatchError",
    "DuplicateParameterError",
    "MissingQueryItemsError",
    "InflateError",
    "MissingParameterError",
    "InvalidUrlError",
    "UrlTooLongError",
    # Pattern table
    "Route",
    "RouteMatch",
    "PatternTable",
    "TableError",
    "DuplicateRouteError",
    "UnknownRouteError",
    "TooManyRoutesError",
    "MAX_ROUTES",
    # Config
    "RouteConfig",
    "TableConfig",
    "ConfigParseError",
    "parse_table_config",
    "load_table",
]
